"""Downloadable file attached to a virtual product."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class VirtualProductFile:
    product_id: int
    filename: str
    display_name: str
