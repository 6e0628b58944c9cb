from pydantic import confloat

# Деньги: конечное число в пределах, где округление до копеек ещё представимо.
MAX_AMOUNT = 1_000_000_000

Money = confloat(allow_inf_nan=False, ge=-MAX_AMOUNT, le=MAX_AMOUNT)
