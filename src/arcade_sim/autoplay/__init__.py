"""Built-in controllers and the headless episode harness."""
