import os

# Verbosity used when neither -q nor -v is given (-1 quiet, 0 normal, 1 verbose, 2 very verbose, 3 debug)
SHELL_VERBOSITY = int(os.getenv("SHELL_VERBOSITY", 0))

# Prefix of environment variables exposed as batch parameters
BATCH_PARAMETER_PREFIX = os.getenv("BATCH_PARAMETER_PREFIX", "BATCH_")

# Directory scanned by `fast-batch exec` for app batch commands
BATCH_COMMANDS_PATH = os.getenv("BATCH_COMMANDS_PATH", "app/cli")
