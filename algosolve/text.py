"""String algorithms: numerals, palindromes, edit distance and the like."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def roman_to_int(s: str) -> int:
    """Return the value of the Roman numeral ``s``.

    Raises ValueError on a character that is not a Roman digit.
    """
    try:
        values = [_ROMAN[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character {exc.args[0]!r}") from None
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += -value if value < following else value
    return total


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string in ``strs``."""
    if not strs:
        return ""
    prefix = strs[0]
    for s in strs:
        while not s.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def reverse_words(s: str) -> str:
    """Return the space-separated words of ``s`` in reverse order,
    joined by single spaces."""
    words = [word for word in s.split(" ") if word]
    return " ".join(reversed(words))


def beauty_sum(s: str) -> int:
    """Sum, over all substrings, the most minus the least character count."""
    total = 0
    for start in range(len(s)):
        counts: Counter[str] = Counter()
        for ch in s[start:]:
            counts[ch] += 1
            frequencies = counts.values()
            total += max(frequencies) - min(frequencies)
    return total


def largest_odd_number(num: str) -> str:
    """Return the longest prefix of ``num`` that ends in an odd digit."""
    end = len(num)
    while end and ord(num[end - 1]) % 2 == 0:
        end -= 1
    return num[:end]


def is_isomorphic(s: str, t: str) -> bool:
    """Return True when ``s`` maps one-to-one onto ``t`` character by character."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def _prefix_function(text: str) -> list[int]:
    """For each position, the length of the longest proper prefix that is
    also a suffix of ``text`` up to there."""
    table = [0] * len(text)
    for i in range(1, len(text)):
        j = table[i - 1]
        while j > 0 and text[i] != text[j]:
            j = table[j - 1]
        if text[i] == text[j]:
            j += 1
        table[i] = j
    return table


def shortest_palindrome(s: str) -> str:
    """Return the shortest palindrome made by adding characters before ``s``."""
    keep = _prefix_function(s + "#" + s[::-1])[-1]
    return s[keep:][::-1] + s


def is_anagram(s: str, t: str) -> bool:
    """Return True when ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def frequency_sort(s: str) -> str:
    """Return ``s`` with its characters grouped, most frequent first."""
    return "".join(ch * count for ch, count in Counter(s).most_common())


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of ``s``; the first on ties."""
    spread = "#" + "".join(ch + "#" for ch in s)
    n = len(spread)
    radius = [0] * n
    center = right = 0
    best_len = best_center = 0
    for i in range(n):
        if i < right:
            radius[i] = min(right - i, radius[2 * center - i])
        a = i + 1 + radius[i]
        b = i - 1 - radius[i]
        while a < n and b >= 0 and spread[a] == spread[b]:
            radius[i] += 1
            a += 1
            b -= 1
        if i + radius[i] > right:
            center, right = i, i + radius[i]
        if radius[i] > best_len:
            best_len, best_center = radius[i], i
    start = (best_center - best_len) // 2
    return s[start:start + best_len]


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row.

    Raises ValueError when ``num_rows`` is less than 1.
    """
    if num_rows < 1:
        raise ValueError(f"number of rows must be at least 1, got {num_rows}")
    if num_rows == 1:
        return s
    rows: list[list[str]] = [[] for _ in range(min(num_rows, len(s)))]
    row, step = 0, -1
    for ch in s:
        rows[row].append(ch)
        if row == 0 or row == num_rows - 1:
            step = -step
        row += step
    return "".join("".join(chars) for chars in rows)


def min_distance(word1: str, word2: str) -> int:
    """Return the edit distance between two words (insert, delete, replace)."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, 1):
        current = [i]
        for j, b in enumerate(word2, 1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def my_atoi(s: str) -> int:
    """Parse a leading signed integer from ``s``, clamped to 32 bits.

    Leading spaces are skipped; parsing stops at the first non-digit.
    """
    text = s.lstrip(" ")
    sign = 1
    if text and text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    result = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digit = ord(ch) - ord("0")
        if result > (INT_MAX - digit) // 10:
            return INT_MAX if sign == 1 else INT_MIN
        result = result * 10 + digit
    return sign * result


def rotate_string(s: str, goal: str) -> bool:
    """Return True when some left rotation of a non-empty ``s`` equals ``goal``."""
    if len(s) != len(goal):
        return False
    return any(s[shift:] + s[:shift] == goal for shift in range(1, len(s) + 1))


def remove_k_digits(num: str, k: int) -> str:
    """Return the smallest number left after removing ``k`` digits from ``num``."""
    stack: list[str] = []
    for ch in num:
        while k > 0 and stack and stack[-1] > ch:
            stack.pop()
            k -= 1
        stack.append(ch)
    if k > 0:
        if k >= len(stack):
            return "0"
        del stack[-k:]
    return "".join(stack).lstrip("0") or "0"


def to_binary(num: int) -> str:
    """Return the binary digits of a non-negative integer.

    Raises ValueError for a negative number.
    """
    if num < 0:
        raise ValueError(f"cannot write a negative number in binary: {num}")
    return format(num, "b")


def convert_date_to_binary(date: str) -> str:
    """Rewrite a ``YYYY-MM-DD`` date with each part in binary.

    Raises ValueError when a part is not a number.
    """
    parts = (date[0:4], date[5:7], date[8:10])
    return "-".join(to_binary(int(part)) for part in parts)