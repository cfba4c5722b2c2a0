import os
import tempfile

# Keep test runs from writing into the working directory's logs/
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle-clone-logs-'))
