"""Command line entry points for notifysetup."""
