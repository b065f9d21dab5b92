"""HTTP front-end for attribute normalization."""
