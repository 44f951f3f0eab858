"""Polynomials kept as an ordered sequence of terms."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Term:
    """A single term ``coef * x^exp``."""

    coef: float
    exp: float

    def format(self) -> str:
        """Return the term, followed by ``" + "`` when its coefficient is not negative."""
        text = f"{self.coef:g}x^{self.exp:g}"
        return text + " + " if self.coef >= 0 else text


class Polynomial:
    """A sequence of terms with list-style editing by exponent key."""

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        self._terms: list[Term] = list(terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        return f"Polynomial({self._terms!r})"

    def _index_of(self, exp: float) -> int | None:
        return next((i for i, term in enumerate(self._terms) if term.exp == exp), None)

    def find(self, exp: float) -> Term | None:
        """Return the first term with exponent ``exp``."""
        index = self._index_of(exp)
        return None if index is None else self._terms[index]

    def insert_last(self, term: Term) -> None:
        """Append ``term``."""
        self._terms.append(term)

    def insert_first(self, term: Term) -> None:
        """Put ``term`` in front."""
        self._terms.insert(0, term)

    def insert_after_key(self, key: float, term: Term) -> None:
        """Insert ``term`` after the first term with exponent ``key``."""
        index = self._index_of(key)
        if index is None:
            raise KeyError(f"Khong tim thay bac {key:g} de chen sau.")
        self._terms.insert(index + 1, term)

    def delete_first(self) -> Term:
        """Remove and return the first term."""
        if not self._terms:
            raise IndexError("delete from empty polynomial")
        return self._terms.pop(0)

    def delete_last(self) -> Term:
        """Remove and return the last term."""
        if not self._terms:
            raise IndexError("delete from empty polynomial")
        return self._terms.pop()

    def delete_after_key(self, key: float) -> Term:
        """Remove and return the term after the first one with exponent ``key``."""
        index = self._index_of(key)
        if index is None or index + 1 >= len(self._terms):
            raise KeyError(
                f"Khong the xoa sau bac {key:g} (khong ton tai hoac la cuoi)."
            )
        return self._terms.pop(index + 1)

    def term_at(self, index: int) -> Term:
        """Return the term at ``index``; a negative index gives the first term."""
        position = max(index, 0)
        if position >= len(self._terms):
            raise IndexError("Vi tri khong hop le.")
        return self._terms[position]

    def sort(self) -> None:
        """Order the terms by descending exponent using an exchange sort."""
        terms = self._terms
        for i in range(len(terms)):
            for j in range(i + 1, len(terms)):
                if terms[i].exp < terms[j].exp:
                    terms[i], terms[j] = terms[j], terms[i]

    def insert_ordered(self, term: Term) -> None:
        """Insert ``term`` into terms kept in descending exponent order."""
        if not self._terms or self._terms[0].exp < term.exp:
            self._terms.insert(0, term)
            return
        position = 1
        for existing in self._terms[1:]:
            if existing.exp < term.exp:
                break
            position += 1
        self._terms.insert(position, term)

    def clear(self) -> None:
        """Drop every term."""
        self._terms.clear()

    def evaluate(self, x: float) -> float:
        """Return the value of the polynomial at ``x``."""
        return sum((term.coef * math.pow(x, term.exp) for term in self._terms), 0.0)

    def render(self) -> str:
        """Return the polynomial as ``f(x) = ...`` or an empty-list notice."""
        if not self._terms:
            return "Danh sach rong!"
        body = "".join(term.format() for term in self._terms)
        return "f(x) = " + body.removesuffix(" + ")


def _read_float(prompt: str) -> float:
    return float(input(prompt))


def _read_term() -> Term:
    coef = _read_float("Nhap he so: ")
    exp = _read_float("Nhap bac: ")
    return Term(coef, exp)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive polynomial session on standard input."""
    poly = Polynomial()

    print("Nhap 3 da thuc them cuoi:")
    for _ in range(3):
        poly.insert_last(_read_term())

    print("\nDanh sach sau khi them cuoi:")
    print(poly.render())

    print("\nSap xep tang dan theo bac:")
    poly.sort()
    print(poly.render())

    print(f"KQ: {poly.evaluate(3):g}")

    print("\nNhap da thuc them dau:")
    poly.insert_first(_read_term())
    print("\nDanh sach sau khi them dau:")
    print(poly.render())

    key = _read_float("\nNhap bac muon chen sau: ")
    term = _read_term()
    try:
        poly.insert_after_key(key, term)
    except KeyError as exc:
        print(exc.args[0])
    print(f"\nDanh sach sau khi chen sau bac {key:g}:")
    print(poly.render())

    print("\nXoa dau danh sach:")
    if poly:
        poly.delete_first()
    print(poly.render())

    print("\nXoa cuoi danh sach:")
    if poly:
        poly.delete_last()
    print(poly.render())

    key = _read_float("\nNhap bac muon xoa sau: ")
    try:
        poly.delete_after_key(key)
    except KeyError as exc:
        print(exc.args[0])
    print(poly.render())

    position = int(input("\nNhap vi tri muon truy xuat: "))
    sys.stdout.write(f"Phan tu tai vi tri {position}: ")
    try:
        print(poly.term_at(position).format())
    except IndexError as exc:
        print(exc.args[0])

    print("\nThem da thuc vao dung vi tri (giam dan theo bac):")
    poly.insert_ordered(_read_term())
    print("\nDanh sach sau khi chen theo thu tu:")
    print(poly.render())

    print("\nGiai phong danh sach.")
    poly.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())