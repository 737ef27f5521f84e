"""SQLAlchemy persistence for fintrack."""
