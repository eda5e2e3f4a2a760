"""String puzzles: unique-letter concatenation, order tables, palindromes and more."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence

__all__ = [
    "max_length",
    "display_table",
    "longest_palindrome",
    "count_good_substrings",
    "is_sum_equal",
    "max_value",
    "remove_occurrences",
    "make_equal",
    "maximum_removals",
]


def _overlap(first: str, second: str) -> bool:
    """True if the two strings share any character."""
    return not set(first).isdisjoint(second)


def _self_overlap(text: str) -> bool:
    """True if some character appears more than once in ``text``."""
    return len(set(text)) != len(text)


def _max_substring(words: Sequence[str]) -> str:
    """Longest concatenation of unique-letter words found by the greedy recursion."""
    first = words[0]
    best = "" if _self_overlap(first) else first
    for i, word in enumerate(words[1:], start=1):
        if _self_overlap(word):
            continue
        if not _overlap(best, word):
            best += word
            continue
        compatible = [other for other in words[:i] if not _overlap(other, word)]
        candidate = _max_substring(compatible) + word if compatible else word
        if len(candidate) > len(best):
            best = candidate
    return best


def max_length(arr: Sequence[str]) -> int:
    """Length of the longest concatenation of words with no repeated character."""
    if not arr:
        raise ValueError("arr must not be empty")
    return len(_max_substring(list(arr)))


def display_table(orders: Sequence[Sequence[str]]) -> list[list[str]]:
    """Tabulate ``[customer, table, food]`` orders into per-table food counts."""
    per_table: defaultdict[str, Counter[str]] = defaultdict(Counter)
    foods: set[str] = set()
    for _customer, table, food in orders:
        per_table[table][food] += 1
        foods.add(food)
    tables = sorted(per_table, key=int)
    menu = sorted(foods)
    result = [["Table", *menu]]
    for table in tables:
        counts = per_table[table]
        result.append([table, *(str(counts[food]) for food in menu)])
    return result


def _expand(chars: str, left: int, right: int) -> tuple[int, int]:
    """Grow a palindrome around ``left``/``right``; return its start and length."""
    while left >= 0 and right < len(chars) and chars[left] == chars[right]:
        left -= 1
        right += 1
    start = left + 1
    return start, max(right - start, 0)


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the earliest one wins on ties."""
    if not s:
        raise ValueError("s must not be empty")
    best_start, best_len = 0, 1
    for i in range(len(s) - 1):
        odd = _expand(s, i, i)
        even = _expand(s, i, i + 1)
        if odd[1] > even[1] and odd[1] > best_len:
            best_start, best_len = odd
        elif even[1] > best_len:
            best_start, best_len = even
    return s[best_start : best_start + best_len]


def count_good_substrings(s: str) -> int:
    """Number of length-three substrings whose characters are all different."""
    return sum(1 for window in zip(s, s[1:], s[2:]) if len(set(window)) == 3)


def _word_value(word: str) -> int:
    """Decimal value of a word whose letters a..j stand for the digits 0..9."""
    value = 0
    for char in word:
        if not "a" <= char <= "j":
            raise ValueError(f"letter out of range a..j: {char!r}")
        value = value * 10 + ord(char) - ord("a")
    return value


def is_sum_equal(first_word: str, second_word: str, target_word: str) -> bool:
    """True if the letter values of the first two words add up to the third's."""
    return _word_value(first_word) + _word_value(second_word) == _word_value(target_word)


def max_value(n: str, x: int) -> str:
    """Insert the digit ``x`` into the number ``n`` to make it as large as possible."""
    digit = str(x)[0]
    if n.startswith("-"):
        for idx, char in enumerate(n[1:], start=1):
            if char == "-":
                break
            if char > digit:
                return n[:idx] + digit + n[idx:]
        return n + digit
    for idx, char in enumerate(n):
        if char < digit:
            return n[:idx] + digit + n[idx:]
    return n + digit


def remove_occurrences(s: str, part: str) -> str:
    """Repeatedly remove the leftmost occurrence of ``part`` until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    while part in s:
        s = s.replace(part, "", 1)
    return s


def make_equal(words: Sequence[str]) -> bool:
    """True if the letters of all words can be shared out to make them equal."""
    counts: Counter[str] = Counter()
    for word in words:
        for char in word:
            if not "a" <= char <= "z":
                raise ValueError(f"only lower-case letters are allowed: {char!r}")
            counts[char] += 1
    size = len(words)
    return all(count % size == 0 for count in counts.values())


def _is_subsequence(pattern: str, text: str, removed: set[int]) -> bool:
    remaining = iter(char for idx, char in enumerate(text) if idx not in removed)
    return all(char in remaining for char in pattern)


def maximum_removals(s: str, p: str, removable: Sequence[int]) -> int:
    """Largest k such that ``p`` stays a subsequence after removing the first k indices."""
    low, high = 0, len(removable)
    while low < high:
        mid = (low + high + 1) // 2
        if _is_subsequence(p, s, set(removable[:mid])):
            low = mid
        else:
            high = mid - 1
    return low