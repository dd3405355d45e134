"""Constraint compiler — turns valid form documents into data validators.

- rules: one declarative rule descriptor per field type
- field_validator: interprets a descriptor into a live validator
- assembler: combines field validators into a document validator
"""
