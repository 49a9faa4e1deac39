"""Report rendering and output layer.

This module formats aggregate values and persists report files.
It keeps file layout decisions out of the aggregation transforms.
"""
