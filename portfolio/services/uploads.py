import os
import time

from ..gateway import default_bucket


def file_extension(name):
    return os.path.splitext(name)[1].lstrip('.').lower()


def timestamped_path(prefix, name):
    """``{prefix}s/{prefix}-{milliseconds}.{ext}`` for an uploaded file name."""
    millis = int(time.time() * 1000)
    return f'{prefix}s/{prefix}-{millis}.{file_extension(name)}'


def store(gateway, prefix, upload):
    """
    Store the file, then look up its public URL. The two steps are not
    atomic: a failed URL lookup leaves the stored file behind.
    """
    bucket = default_bucket()
    path = gateway.upload(bucket, timestamped_path(prefix, upload.name), upload)
    return path, gateway.public_url(bucket, path)
