# shopkit: Atomic components
