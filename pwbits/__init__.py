# pwbits
# (passwords with tracked entropy)
#

__version__ = '1.0.0'
