"""Manual verification harness for gasless-transfer SDK clients."""
