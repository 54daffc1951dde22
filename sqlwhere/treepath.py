"""treepath.py -- read-only paths into tree-structured expressions.
supports 'paths', tuples that describe how to index the tree.
"""

class PathTree:
  "'tree path' is implemented here (i.e. square brackets for get)"
  ATTRS = ()
  VARLEN = ()

  def child(self, index):
    "helper for __getitem__"
    if isinstance(index, tuple):
      attr, i = index
      return getattr(self, attr)[i]
    else: return getattr(self, index)

  @staticmethod
  def check_i(i):
    "helper"
    if not isinstance(i, tuple):
      raise TypeError('want:tuple', type(i))

  def __getitem__(self, i):
    self.check_i(i)
    if len(i) == 0:
      return self
    elif len(i) == 1:
      return self.child(i[0])
    else:
      return self.child(i[0])[i[1:]]

def children(item):
  "yield (step, child) for a PathTree's attrs; a VARLEN attr yields one (attr, i) step per element. leaves yield nothing."
  if not isinstance(item, PathTree):
    return
  for attr in item.ATTRS:
    val = getattr(item, attr)
    if attr in item.VARLEN:
      for i, elt in enumerate(val or ()):
        yield (attr, i), elt
    else:
      yield attr, val

def sub_slots(item, match_fn, match=False, recurse_into_matches=True):
  """depth-first, left-to-right list of tree-paths (tuples) to descendants that match match_fn.
  The root is only tested when match=True. With recurse_into_matches=False a match hides its own subtree.
  """
  arr = []
  stack = [((), item, match)]
  while stack:
    path, node, testable = stack.pop()
    if testable and match_fn(node):
      arr.append(path)
      if not recurse_into_matches: continue
    # reversed so the leftmost child is popped first
    stack.extend((path + (step,), child, True) for step, child in reversed(list(children(node))))
  return arr
