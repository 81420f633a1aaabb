# vaultkit

vaultkit is a pure-Python toolkit with building blocks for a small
encrypted data vault. It depends on nothing outside the standard library
and needs Python 3.10 or newer.

- **Hashing**: SHA-1 (`vaultkit.sha1.Sha1`) and a Keccak sponge with SHA-3
  padding (`vaultkit.sha3.Sha3`, plus the raw permutation
  `vaultkit.sha3.keccak_f`).
- **AES** with 128, 192 and 256-bit keys in ECB, CBC and CTR modes
  (`vaultkit.aesmodes`), built on the block primitives in
  `vaultkit.aescipher`.
- **Data structures**: an AVL tree (`vaultkit.avl.AVLTree`), a growable
  array (`vaultkit.dynamicarray.DynamicArray`) and a text buffer
  (`vaultkit.strstream.StrStream`).
- **Helpers**: hex and endianness conversion (`vaultkit.numio`), bit and
  sequence rotation (`vaultkit.bits`), integer helpers (`vaultkit.mathutil`)
  and console prompts with masked input (`vaultkit.consoleio`).

## Hashing

```python
from vaultkit.sha1 import Sha1
from vaultkit.sha3 import Sha3

hasher = Sha1()
hasher.update(b"ab")
hasher.update(b"c")
print(hasher.digest().hex())

sha3_256 = Sha3(rate=136, digest_size=32)
sha3_256.update(b"abc")
print(sha3_256.digest().hex())
```

`digest()` does not end the hash: more data can be fed with `update()`
afterwards. `Sha3` takes its rate and digest size in bytes; the rate must
be a multiple of 8 below 200 (136 with 32 bytes out gives SHA3-256, 72
with 64 bytes out gives SHA3-512).

## AES

```python
from vaultkit import aesmodes

key = bytes(16)
iv = bytes(16)

ciphertext = aesmodes.encrypt(b"attack at dawn", key, 128, aesmodes.Mode.CBC, iv)
plaintext = aesmodes.decrypt(ciphertext, key, 128, aesmodes.Mode.CBC, iv)
```

ECB and CBC pad every message with PKCS#5 padding, so the ciphertext is
always a whole number of 16-byte blocks. CTR is a stream mode: its
ciphertext is exactly as long as the plaintext. CBC and CTR need a 16-byte
`iv`. An unknown mode value is treated as ECB, and a `key_bits` other than
128, 192 or 256 as 128. Decryption raises `ValueError` on a ciphertext that
is not a whole number of blocks or whose padding is invalid.

When many messages use the same key, build the round keys once with
`aescipher.key_schedule(key, key_bits)` and call
`aesmodes.encrypt_with_schedule` and `aesmodes.decrypt_with_schedule`.
`aescipher` also offers `encrypt_block`, `decrypt_block`, `galois_mul` and
`increment_counter`.

## Data structures

```python
from vaultkit.avl import AVLTree
from vaultkit.dynamicarray import DynamicArray
from vaultkit.strstream import StrStream

tree = AVLTree()
tree.insert("github", "entry one")
tree.insert("google", "entry two")
assert "github" in tree
print(tree.get("google"))
print([key for key, value in tree.inorder()])

items = DynamicArray()
items.add_last("a")
items.add_first("b")
print(list(items), items.capacity)

stream = StrStream("get entry category")
print(stream.split(" ", 2))   # ['get', 'entry category']
```

`AVLTree.get` and `AVLTree.remove` raise `KeyError` for a missing key;
`preorder()` and `postorder()` yield `(key, value)` pairs like `inorder()`.
`DynamicArray` raises `IndexError` for an index out of range.

## Helpers

`numio.scan_hex("0aff")` gives `b"\x0a\xff"`, and
`numio.format_bytes(data, " ", 4)` prints bytes as uppercase hex words.
`consoleio.get_confirmation(prompt)` asks until it reads `y` or `n`, and
`consoleio.get_masked_input(prompt)` reads a line while echoing `*`.

## What vaultkit does not do

vaultkit is a library only. It has no command to run, does not store
vault data on disk, and does not manage accounts or entries. It provides
no SHA-2 hashes, no HMAC and no password-based key derivation.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.