"misc whatever"

import os, sys

class SqlWhereError(Exception):
  "base class for errors raised by this package"

def tbframes(traceback):
  'unwind traceback tb_next structure to array'
  frames = [traceback.tb_frame]
  while traceback.tb_next:
    traceback = traceback.tb_next
    frames.append(traceback.tb_frame)
  return frames
def tbfuncs(frames):
  'this takes the frames array returned by tbframes'
  return ['%s:%s:%s' % (os.path.split(f.f_code.co_filename)[-1], f.f_code.co_name, f.f_lineno) for f in frames]
def trace():
  "compact file:func:line list for the exception currently being handled"
  return tbfuncs(tbframes(sys.exc_info()[2]))
