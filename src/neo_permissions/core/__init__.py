"""Shared kernel: exceptions, identifiers, audit info and the event base."""
