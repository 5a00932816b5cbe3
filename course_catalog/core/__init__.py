"""Pure domain helpers: identifiers, field naming, coercion, errors."""
