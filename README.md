# zosromdisk

Build and inspect Zeal 8-bit OS romdisk images, plus Python models of
the OS user-space interfaces: error codes, time and dates, file system
structures, system configuration, and the keyboard, serial and video
driver definitions. It has no dependencies outside the standard library.

## Installing

```
pip install .
```

## Packing files into a romdisk

```
zos-pack disk.img init.bin simple.txt
```

The first argument is the image to write; the rest are the files to
store in it, in that order. Each file is stored under its base name,
truncated to 16 bytes, together with its size, its offset in the image
and its local modification time.

The output file is created with mode 0644 if it does not exist. It is
not truncated first: if it already exists and is longer than the new
image, its trailing bytes are left in place.

Exit status:

* `0` – image written;
* `1` – fewer than two arguments (a usage line is printed);
* `2` – the output file could not be opened;
* `3` – an input file could not be read or stat'ed, or a value did not
  fit the format.

## Image layout

* a 16-bit little-endian entry count;
* one 32-byte entry per file: name (16 bytes, NUL-padded), size
  (32-bit LE), offset from the start of the image (32-bit LE), then
  eight BCD bytes: year hundreds, rest of the year, month, day, weekday
  (0 for Sunday to 6 for Saturday), hours, minutes, seconds;
* the file contents, one after another, in the order given.

## From Python

```python
from zosromdisk.packer import build_image, write_image, RomdiskImage

write_image("disk.img", ["init.bin", "simple.txt"])

data = build_image(["init.bin"])
image = RomdiskImage.from_bytes(data)
print(image.names)            # ['init.bin']
contents = image.read("init.bin")
```

`RomdiskImage` can be iterated over its `RomdiskEntry` objects and
supports `len()`. `read(name)` raises `KeyError` for an unknown name and
`ValueError` when the entry runs past the end of the image.
`RomdiskEntry` has `name`, `size`, `offset` and `date` (a `ZosDate`).

## Interface models

* `zosromdisk.errors` – `ErrorCode`, the `ZosError` exception (carrying
  `code`) and `check(code)`, which raises `ZosError` for anything other
  than `ErrorCode.SUCCESS`.
* `zosromdisk.zostime` – `ZosTime` (milliseconds), `ZosDate` (all
  fields BCD-encoded, weekday 1 for Sunday to 7 for Saturday, with
  `from_datetime` and `to_datetime`), `to_bcd` and `from_bcd`.
* `zosromdisk.vfs` – `OpenFlag`, `Whence`, `FsType`, `DirEntry`, `Stat`,
  `is_file` and `is_dir`, and the constants `DEV_STDOUT`, `DEV_STDIN`,
  `FILENAME_LEN_MAX` and `PATH_MAX`.
* `zosromdisk.system` – `Target`, `ExecMode` and `KernelConfig`.
* `zosromdisk.keyboard` – `KbCommand`, `KbMode`, `KbReadFlag`, `Key`,
  `KeyEvent`, `is_special` and `parse_raw_events`, which turns bytes
  read in raw mode into press and release events.
* `zosromdisk.serial` – `SerialCommand` and `SerialAttr`.
* `zosromdisk.video` – `VideoCommand`, `TextColor`, `TextArea` and
  `text_color(fg, bg)`.

Each structure class converts to and from its little-endian binary
layout with `to_bytes()` and `from_bytes()`, and rejects values that do
not fit their fields with `ValueError`.

## What this package does not do

The interface modules only describe values and binary layouts; nothing
here performs system calls or talks to a running Zeal 8-bit OS. There
is no command for extracting files from an image; use
`RomdiskImage.read` from Python instead.

## Running the tests

```
pip install ".[test]"
pytest
```