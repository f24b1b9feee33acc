"""Book catalog front end for a remote catalog API."""
