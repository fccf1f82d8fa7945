# backend provided by Python Standard Library

import os


randombytes = os.urandom
