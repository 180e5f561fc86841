# linkresolve

Helpers for turning links found inside local documents (HTML, Markdown and
similar files) into absolute filesystem paths and `file://` URLs. These are
building blocks a link checker needs before it can check local links.

## Installation

From a checkout of the project:

```
pip install .
```

The package has no runtime dependencies beyond the standard library.

## Modules

### `linkresolve.urltext`

- `remove_get_params_and_separate_fragment(url)` drops the query string from a
  link and splits off its fragment. The fragment is `None` when the link has
  no `#`. Everything after the first `#` is the fragment, even if it contains
  `?`.

  ```python
  from linkresolve.urltext import remove_get_params_and_separate_fragment

  remove_get_params_and_separate_fragment("test.png?foo=bar#anchor")
  # ("test.png", "anchor")
  remove_get_params_and_separate_fragment("test.png#anchor?anchor!?")
  # ("test.png", "anchor?anchor!?")
  ```

- `trim_error_output(text)` shortens a verbose HTTP client error message to
  the part after `error trying to connect:`, with surrounding whitespace
  removed. Any other message is returned unchanged.

### `linkresolve.paths`

- `absolute_path(path)` makes a path absolute and collapses `.` and `..`
  parts without touching the file system. Relative paths are taken against
  the working directory as it was on the first call; results are cached.
- `resolve(src, dst, ignore_absolute_local_links)` resolves a link target
  `dst` as seen from the document `src`. A relative target is looked up next
  to `src`. An absolute target gives `None` when
  `ignore_absolute_local_links` is true, and is returned cleaned otherwise.
  Raises `InvalidFileError` when a relative target is linked from a `src`
  that has no parent directory (such as `/`).
- `contains(parent, child)` tells whether `child` is inside `parent` or is
  `parent` itself. Both paths must exist; symlinks and `..` are resolved
  first. Raises `FileNotFoundError` (or another `OSError`) when either path
  cannot be resolved.
- `InvalidFileError` is a `ValueError` subclass with the offending path in
  its `path` attribute.

```python
from linkresolve.paths import resolve

resolve("/path/to/index.html", "./foo.html", True)
# PosixPath('/path/to/foo.html')
resolve("/path/to/index.html", "/etc/hosts", True)
# None
```

### `linkresolve.local_links`

- `is_anchor(text)` tells whether a link is a bare `#fragment`.
- `prepend_root_dir_if_absolute_local_link(text, root_dir)` puts `root_dir`
  in front of links that start with `/`; other links, or a `root_dir` of
  `None`, leave the text unchanged.
- `resolve_and_create_url(src_path, dest_path, ignore_absolute_local_links)`
  turns a link inside a local file into a `file://` URL string. Query
  parameters are dropped, the fragment is kept, and the path is
  percent-decoded before it is resolved so that it is not encoded twice.
  Raises `UnicodeDecodeError` if the decoded path is not valid UTF-8,
  `InvalidPathToUriError` if the path cannot be resolved (including an
  ignored absolute link), and `InvalidUrlFromPathError` if the resolved path
  cannot be written as a file URL.
- `create_uri_from_file_path(file_path, link_text, ignore_absolute_local_links)`
  does the same, and points bare anchors at the file they appear in. It
  raises `InvalidFileError` if an anchor's file has no name, and
  `InvalidPathToUriError` for any other failure to build the URL.
- `InvalidPathToUriError` and `InvalidUrlFromPathError` are `ValueError`
  subclasses that carry the offending path in their `path` attribute.

```python
from linkresolve.local_links import create_uri_from_file_path, resolve_and_create_url

create_uri_from_file_path("/some/page.html", "#fragment", True)
# "file:///some/page.html#fragment"
resolve_and_create_url("/README.md", "test+encoding", True)
# "file:///test+encoding"
```

## What it does not do

This package only works on link text and local paths. It does not extract
links from documents, send HTTP requests, check whether remote links are
alive, or provide a command-line tool; those are left to the program that
uses it.

## Running the tests

```
pip install -e ".[test]"
pytest
```