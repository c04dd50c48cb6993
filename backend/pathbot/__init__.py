"""Mock Pathbot maze server for exercising maze-walking clients."""
