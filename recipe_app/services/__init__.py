"""Service layer between the web routes and the repositories."""
