"""Shipment tracking: status derivation and chained document lookup."""
