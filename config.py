# config.py
import os

HASH_ALGO = os.getenv("RECSUM_HASH_ALGO", "sha256")  # Default hash algorithm
WORKERS = int(os.getenv("RECSUM_WORKERS", "3"))  # Simultaneous workers per root
JOB_QUEUE_SIZE = 20  # Paths buffered between the walker and the workers
OUTPUT_QUEUE_SIZE = 1  # Results buffered between the workers and the writer
CHUNK_SIZE = 64 * 1024  # Bytes read per update
LOG_FILE = os.getenv("RECSUM_LOG_FILE")  # Unset disables file logging

VERSION = "v0.0.1"
