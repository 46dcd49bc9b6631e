"""Views presenting the tracker's expenses, total and per-category chart."""
