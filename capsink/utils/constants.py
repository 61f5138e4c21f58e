CAPSINK_NAME = "capsink"
CAPSINK_VERSION = "0.1"
