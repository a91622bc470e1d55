# job/models/__init__.py
from .jobs import Job, JobCENumber
