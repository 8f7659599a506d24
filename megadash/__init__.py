"""Loop 2D mínimo: sprites animados, input y render por tick."""
