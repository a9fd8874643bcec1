"""Helpers: MD5 digests, parameter flattening, a semaphore and common functions."""