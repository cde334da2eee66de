"""Functional primitives for blockwise.

This package provides the block-based iteration helpers: ``iteration`` for
ordered collections, ``mapping`` for keyed collections, and ``containers``
for rebuilding results as the same kind of collection as the input. The
helpers are stateless and never modify their inputs, so they compose into
pipelines.
"""
