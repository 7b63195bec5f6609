# b64tool

A small Base64 encoder and decoder. You can use it as a library or
through a simple desktop window.

## Installation

    pip install .

The window uses `tkinter`, which comes with most Python installations.
The package has no other dependencies.

## The window

Start it with:

    b64tool

You can also start it with `python -m b64tool.app`. The command takes no
options other than `--help`.

The window has a fixed size of 800×600 and these parts:

- An input box at the top.
- A choice between **Encode** and **Decode**. **Encode** is selected at start.
- **Process** runs the chosen conversion on the input and shows the result in
  the box below.
  - **Encode** encodes the text as UTF-8 and then as standard Base64.
  - **Decode** decodes Base64 and shows the bytes as UTF-8 text. Any byte that
    is not valid UTF-8 appears as a replacement character.
  - If the input is not valid Base64, an error box appears and the result
    stays as it was.
- **Copy** puts on the clipboard the part of the result that comes after its
  first colon (`:`), with the surrounding whitespace removed. If the result
  has no colon, the clipboard is set to empty text.
- A *Help* menu with *About* and *Exit*.

## Library use

```python
from b64tool.codec import encode, encode_pem, encode_mime, decode, Base64Error

encode(b"hello")                     # 'aGVsbG8='
encode("hello")                      # text is encoded as UTF-8 first
encode(b"\xfb\xff", url=True)        # '-_8.' : URL-safe alphabet, '.' as padding
encode_pem(data)                     # standard Base64 in lines of 64 characters
encode_mime(data)                    # standard Base64 in lines of 76 characters
decode("aGVsbG8=")                   # b'hello'
decode(pem_text, remove_linebreaks=True)
```

`encode` and the line-wrapping functions accept `str`, `bytes`,
`bytearray` or `memoryview`, and return `str`. `decode` accepts `str` or a
bytes-like object and returns `bytes`.

Decoding is lenient:

- It accepts both the standard (`+`, `/`) and URL-safe (`-`, `_`) alphabets.
- It accepts `=` or `.` as padding, and also input with no padding at all.
- With `remove_linebreaks=True`, every `\n` is removed before decoding. Use this
  for the output of `encode_pem` or `encode_mime`.

`decode` raises `Base64Error`, a subclass of `ValueError`, in two cases:

- the input contains a character outside both alphabets, such as whitespace or
  a stray newline;
- the final group has only one character.

The helpers behind the window can be used on their own:

```python
from b64tool.app import Mode, process, clipboard_text

process("hello", Mode.ENCODE)        # 'aGVsbG8='
process("aGVsbG8=", "Decode")        # 'hello'
clipboard_text("Result: aGVsbG8=")   # 'aGVsbG8='
```

## What it does not do

The `b64tool` command only opens the window. It has no command-line mode
for encoding or decoding files or standard input; for that, use the
functions in `b64tool.codec`. The window always encodes with the standard
alphabet, with no line wrapping.

## Running the tests

    pip install .[test]
    pytest