"""Tests for graphql_blueprint.error"""
