"""
ReleaseHub Utils Package
========================
Logging, environment handling and the release-name parser.
"""
