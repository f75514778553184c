"""Command line interface for clip-react."""
