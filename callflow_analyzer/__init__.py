"""callflow-analyzer — reconstruct call-routing flows from a switch log."""
