"""
numtower — аксиоматическая числовая башня с оракулами изоморфизма

Пакеты:
- core:         настройки точности и таксономия ошибок
- kernel:       эффективные числовые примитивы и схема аксиом Пеано
- construction: ℕ → ℤ → ℚ → ℝ → ℂ из первых принципов
- isomorphism:  мосты construction ↔ kernel, вложения и проверки
"""

__version__ = "0.1.0"
