"""HTTP surface for LeftoverLink."""
