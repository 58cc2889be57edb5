""" Hardware drivers. """

__author__ = "Alexander Sowitzki"
