#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/shared/clamping.py


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp_range(v: float, low: float, high: float) -> float:
    if v != v:
        return low
    return max(low, min(high, v))
