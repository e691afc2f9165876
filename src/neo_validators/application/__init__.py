"""Application layer: decoders, helpers and validators."""
