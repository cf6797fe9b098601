#!/usr/bin/env python

from .columns import termgrid

__all__ = ["termgrid"]
