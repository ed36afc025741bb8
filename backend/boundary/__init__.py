"""
Boundary layer for external system integrations.

Handles all interactions with external systems: the relational database
and the AWS language services (Translate, Polly, Textract, Transcribe, S3).
"""
