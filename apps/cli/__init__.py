"""Command-line entrypoint for SpotHopper reservations."""
