"""Application layer: discovery, pipeline, modes, reporters."""
