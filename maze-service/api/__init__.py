SERVICE_NAME = "Maze Service"
VERSION = "0.1.0"
