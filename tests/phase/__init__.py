"""Tests for graphql_blueprint.phase"""
