# probe start cell
SOURCE = (0, 0)

# rows + cols at or above this switch the probe to an explicit stack
RECURSION_CUTOVER = 800

# a single-cell grid counts as cuttable
SINGLE_CELL_CUTTABLE = True
