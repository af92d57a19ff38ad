"""Unified command-line interface for grinvoice.

Usage:
    grinvoice extract <file.ocr.json> [--trace] [--drop-oversized]
    grinvoice scan <image> [--api-key KEY] [--no-save]
    grinvoice evaluate <truth.csv>
"""
