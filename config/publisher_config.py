import os


class PublisherConfig:
    
    INTERVAL_MS = int(os.getenv("PUBLISH_INTERVAL_MS", "500"))
    GENERATOR = os.getenv("DATAGEN_GENERATOR", "counter")
    LOG_LEVEL = os.getenv("DATAGEN_LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("DATAGEN_LOG_DIR", "logs")
