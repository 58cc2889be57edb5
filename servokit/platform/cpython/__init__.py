""" Helpers for cpython hosts. """

__author__ = "Alexander Sowitzki"
