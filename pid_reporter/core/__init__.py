"""Process introspection and the run sequence."""
