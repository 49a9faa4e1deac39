"""Policy data ingestion and report pipeline.

This module reads the zipped policy export and drives report generation.
It hands typed policy records to the aggregation transforms.
"""
