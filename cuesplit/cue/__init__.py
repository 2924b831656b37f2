"""CUE sheet pairing, metadata and output naming."""
