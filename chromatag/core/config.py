#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================


# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
LUM_WHITE = 1.0                    # Relative luminance of pure white
LUM_BLACK = 0.0                    # Relative luminance of pure black

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
RGB_MAX = 255.0                    # 8-bit color depth limit
BYTE_MAX = 255.0                   # Largest value of a digest byte
HUE_MAX = 360.0                    # Full circle degrees
EXP_2 = 2                          # Rounding precision for reported ratios

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# OKLab to LMS' matrix coefficients (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_TO_LMS_PRIME_LA = 0.3963377774       # Contribution of 'a' to L' channel
OKLAB_TO_LMS_PRIME_LB = 0.2158037573       # Contribution of 'b' to L' channel
OKLAB_TO_LMS_PRIME_MA = -0.1055613458      # Contribution of 'a' to M' channel
OKLAB_TO_LMS_PRIME_MB = -0.0638541728      # Contribution of 'b' to M' channel
OKLAB_TO_LMS_PRIME_SA = -0.0894841775      # Contribution of 'a' to S' channel
OKLAB_TO_LMS_PRIME_SB = -1.2914855480      # Contribution of 'b' to S' channel

# LMS to linear sRGB matrix coefficients (Björn Ottosson, 2020)
OKLAB_LMS_TO_SRGB_RL = 4.0767416621        # Weight of L for linear Red
OKLAB_LMS_TO_SRGB_RM = -3.3077115913       # Weight of M for linear Red
OKLAB_LMS_TO_SRGB_RS = 0.2309699292        # Weight of S for linear Red
OKLAB_LMS_TO_SRGB_GL = -1.2684380046       # Weight of L for linear Green
OKLAB_LMS_TO_SRGB_GM = 2.6097574011        # Weight of M for linear Green
OKLAB_LMS_TO_SRGB_GS = -0.3413193965       # Weight of S for linear Green
OKLAB_LMS_TO_SRGB_BL = -0.0041960863       # Weight of L for linear Blue
OKLAB_LMS_TO_SRGB_BM = -0.7034186147       # Weight of M for linear Blue
OKLAB_LMS_TO_SRGB_BS = 1.7076147010        # Weight of S for linear Blue

# ==========================================
# Seed Extraction
# ==========================================

DIGEST_SIZE = 32                   # SHA-256 output length in bytes
SEED_BYTES = 4                     # Digest bytes consumed by the extractor
HASH_TOKEN_BYTES = 12              # Digest bytes rendered into a hash token

HUE_BYTE = 0                       # Primary hue byte
CHROMA_BYTE = 1                    # Chroma byte
LIGHTNESS_BYTE = 2                 # Lightness byte
HUE_JITTER_BYTE = 3                # Secondary hue byte
HUE_JITTER_WEIGHT = 0.25           # Weight of the secondary hue byte

CHROMA_BASE = 0.16                 # Chroma band start (vivid but not neon)
CHROMA_SPAN = 0.14                 # Chroma band width, band is 0.16..0.30
LIGHTNESS_BASE = 0.50              # Lightness band start
LIGHTNESS_SPAN = 0.18              # Lightness band width, band is 0.50..0.68
DARK_LIGHTNESS_FLOOR = 0.56        # Dark backgrounds need a visible fill
LIGHT_LIGHTNESS_CEIL = 0.70        # Light backgrounds must not wash out

# ==========================================
# Gamut Mapping & Contrast Optimization
# ==========================================

GAMUT_EPS = 1e-3                   # Tolerance around the [0, 1] linear sRGB cube
GAMUT_CHROMA_FACTOR = 0.92         # Chroma scale per step for the initial mapping
GAMUT_MAX_ITERATIONS = 12          # Step cap for the initial mapping
REMAP_CHROMA_FACTOR = 0.95         # Chroma scale per step inside the optimizer
REMAP_MAX_ITERATIONS = 8           # Step cap inside the optimizer

CONTRAST_TARGET = WCAG_AA_NORMAL   # Default contrast goal against white or black text
CONTRAST_MAX_ITERATIONS = 16       # Lightness adjustment budget
CONTRAST_STEP = 0.02               # Initial lightness step
CONTRAST_STEP_DECAY = 0.9          # Geometric decay of the step per iteration
CONTRAST_LIGHTNESS_MIN = 0.42      # Darkest lightness the optimizer may reach
CONTRAST_LIGHTNESS_MAX = 0.78      # Lightest lightness the optimizer may reach

# ==========================================
# CLI UI & Data Structures
# ==========================================

MAX_COUNT = 10000                  # Maximum number of generated inputs for audit
DEFAULT_AUDIT_COUNT = 100          # Default number of audited inputs
DEFAULT_AUDIT_PREFIX = "string"    # Default prefix of audited inputs
MAX_TEXT_PREVIEW = 24              # Characters of input shown in swatches

STYLE_CHOICES = ["light", "dark", "both"]
OUTPUT_FORMATS = ["text", "json", "prettyjson"]

# Keys enabled by --all-tech-infos
TECH_INFO_KEYS = [
    'rgb',
    'luminance',
    'oklch',
    'contrast',
    'token',
]

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
