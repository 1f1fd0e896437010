"""Tests for graphql_blueprint.language"""
