"""project-opener: a personal registry of local projects."""

__version__ = "1.0.0"
