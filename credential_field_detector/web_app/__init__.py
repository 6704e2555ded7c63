"""HTTP interface for Credential Field Detector."""
