"""Shell init templates bundled with burrow."""
