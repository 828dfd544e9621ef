"""Airport domain core: DB- and transport-independent schemas."""
