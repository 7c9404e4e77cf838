"""Command line front end for gvt."""
