"""Tests for graphql_blueprint.validation"""
