"""Request authentication dependencies."""
