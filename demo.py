#!/usr/bin/env python3
"""
Demo of seekbuf features
"""

import shutil

from seekbuf import EndOfDataError, InvalidArgumentError, SeekableBuffer, Whence

print("=" * 60)
print("seekbuf Feature Demo")
print("=" * 60)

# Feature 1: Overwrite at the cursor, append past the end
print("\n1. Overwrite and Append")
print("-" * 60)

buf = SeekableBuffer()
buf.write(b"foobar")
buf.seek(0)
buf.write(b"baz")
print(f"✅ After overwriting the prefix: {buf.getvalue()!r}")
buf.seek(0, Whence.END)
buf.write(b"quxbaz")
print(f"✅ After appending: {buf.getvalue()!r}")


# Feature 2: Seeking from every origin
print("\n2. Seeking")
print("-" * 60)

buf = SeekableBuffer(b"foobar")
print(f"seek(3, START)   -> {buf.seek(3, Whence.START)}, remainder {bytes(buf.view())!r}")
print(f"seek(1, CURRENT) -> {buf.seek(1, Whence.CURRENT)}, remainder {bytes(buf.view())!r}")
print(f"seek(-1, END)    -> {buf.seek(-1, Whence.END)}, remainder {bytes(buf.view())!r}")

try:
    buf.seek(6, Whence.START)
except InvalidArgumentError as e:
    print(f"✅ Rejected: {e} (cursor still at {buf.tell()})")


# Feature 3: Short reads and end of data
print("\n3. Reading")
print("-" * 60)

buf = SeekableBuffer(b"foobarquxbaz")
buf.seek(3)
dest = bytearray(10)
n = buf.readinto(dest)
print(f"✅ Short read of {n} bytes: {bytes(dest[:n])!r}")

try:
    buf.readinto(dest)
except EndOfDataError as e:
    print(f"✅ Caught: {e}")


# Feature 4: Writing past the end fills the gap
print("\n4. Gap Fill")
print("-" * 60)

buf = SeekableBuffer(b"foo", fill=b".")
buf.seek(3, Whence.END)
buf.write(b"bar")
print(f"✅ {buf.getvalue()!r}")


# Feature 5: Works where a binary file is expected
print("\n5. File Protocol")
print("-" * 60)

source = SeekableBuffer(b"copied through shutil")
target = SeekableBuffer()
shutil.copyfileobj(source, target)
print(f"✅ {target.getvalue()!r}")

print("\n" + "=" * 60)
print("All features demonstrated successfully! 🎉")
print("=" * 60)
