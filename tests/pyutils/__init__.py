"""Tests for graphql_blueprint.pyutils"""
