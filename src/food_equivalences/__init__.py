"""Food substitution catalog with ingredient and nutrition-goal search."""
