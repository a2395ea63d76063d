"""
vigenere_breaker — Live Demo: Frequency Attack
===============================================
Run:  python examples/demo_frequency_attack.py

Encrypts a known message, breaks it back with frequency analysis, then
runs the same attack on the bundled sample intercept.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_breaker                  import SAMPLE_CIPHERTEXT, encode, break_vigenere
from vigenere_breaker.report           import format_segment

LINE = "═" * 70
MSG  = "E" * 40 + "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG"
KEY  = "CODE"

def header(step, name):
    print(f"\n{LINE}")
    print(f"  {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  vigenere_breaker — Frequency Attack Demo")
print("  The Christman AI Project  |  Apache 2.0")
print(LINE)

# ── KNOWN KEY ────────────────────────────────────────────────────────────────
header(1, f"ENCRYPT with key {KEY}")
ct = encode(MSG, KEY)
ok("Plaintext",  MSG[:40] + "...")
ok("Ciphertext", ct[:40] + "...")

header(2, "BREAK — key length 4, key unknown")
t0      = time.perf_counter()
result  = break_vigenere(ct, len(KEY))
elapsed = time.perf_counter() - t0
for report in result.segments:
    print("  " + format_segment(report).replace("\n", "\n  "))
ok("Candidate key", result.candidate_key)
ok("Key recovered", str(result.candidate_key == KEY))
ok("Decrypted",     result.decoded[:40] + "...")
ok("Analysis",      f"{elapsed*1000:.2f} ms")

# ── SAMPLE INTERCEPT ─────────────────────────────────────────────────────────
header(3, "SAMPLE INTERCEPT — key length 4")
for legacy in (False, True):
    r = break_vigenere(SAMPLE_CIPHERTEXT, 4, count_first_occurrence=not legacy)
    label = "legacy counts" if legacy else "true counts"
    tops = "  ".join(f"{s.ranked[0][0]}={s.ranked[0][1]}" for s in r.segments)
    ok(f"Top letters ({label})", tops)
    ok(f"Candidate key ({label})", r.candidate_key)
ok("Decryption attempt", r.decoded[:40] + "...")

print(f"\n{LINE}")
print("  DEMO COMPLETE")
print(LINE + "\n")
