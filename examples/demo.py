"""
aesgcm — Live Demo: seal / open with a generated nonce
======================================================
Run:  python examples/demo.py

Generates a nonce, seals a message with associated data, opens it
again, then shows what a single flipped bit does to the open.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from aesgcm import Aes256Gcm, generate_nonce, AuthenticationFailure, TAG_SIZE

LINE = "═" * 70
KEY  = b"Super Duper Secret Actually Not!"   # len = KEY_SIZE
MSG  = b"This will be encrypted and authenticated"
AAD  = b"This will be authenticated only"

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

print(f"\n{LINE}")
print("  aesgcm — AES-256-GCM Demo")
print(LINE)

g     = Aes256Gcm(KEY)
nonce = generate_nonce()
ok("Nonce", nonce.hex())

t0 = time.perf_counter()
ct = g.seal(MSG, AAD, nonce)
pt = g.open(ct, AAD, nonce)
elapsed = time.perf_counter() - t0

ok("Sealed size", f"{len(ct)} bytes (data={len(MSG)} + tag={TAG_SIZE})")
ok("Round-trip",  f"{elapsed*1000:.2f} ms")
ok("Match",       str(pt == MSG))

tampered = bytearray(ct)
tampered[0] ^= 0x01
try:
    g.open(bytes(tampered), AAD, nonce)
    print("  ✗  Tampered ciphertext was accepted")
    sys.exit(1)
except AuthenticationFailure:
    ok("Tamper detected", "AuthenticationFailure")

print(LINE + "\n")
