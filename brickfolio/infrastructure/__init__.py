"""Infrastructure: settings, logging and collection loading."""
