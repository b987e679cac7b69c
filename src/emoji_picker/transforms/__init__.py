"""Apache Beam transforms over the emoji catalog."""
