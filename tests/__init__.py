"""Tests for graphql_blueprint"""
