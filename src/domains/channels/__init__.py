"""Channel listing, lookup and administration."""
