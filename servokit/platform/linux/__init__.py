""" Linux platform collaborators. """

__author__ = "Alexander Sowitzki"
