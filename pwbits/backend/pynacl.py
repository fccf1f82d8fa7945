# backend provided by PyNaCl (libsodium randombytes_buf)

import nacl.utils


randombytes = nacl.utils.random
