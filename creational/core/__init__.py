"""Application plumbing: settings, logging, errors, data models and wiring."""
