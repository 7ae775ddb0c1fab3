#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/subcommands/command_registry.py

from . import audit

SUBCOMMANDS = {
    'audit': audit,
}
