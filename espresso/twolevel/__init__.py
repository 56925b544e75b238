"""Two-level minimization of covers of cubes."""
from espresso.twolevel.cube import Shape
from espresso.twolevel.minimize import cost
from espresso.twolevel.minimize import espresso
from espresso.twolevel.minimize import espresso_exact
