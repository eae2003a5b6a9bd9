"""constants, math helpers, durations and datasets"""
