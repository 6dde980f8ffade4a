"""Command-line interface for the wellness tracker."""
