"""Recipe management web application."""
