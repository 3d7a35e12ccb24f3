from workease.cli.app import app

__all__ = ["app"]
