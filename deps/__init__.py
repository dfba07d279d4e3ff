"""Conversion pipeline used by the CLI and the web service"""
