"""Packaged JSON Schemas for trigger payloads.

Each file is named after the trigger kind it describes and is loaded through
``models.json_schema_loader``.
"""
