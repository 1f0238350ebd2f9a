# Copyright 2018 The tritoncli Authors. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""A module for walking the CLI command tree."""


class Walker(object):
  """Base class for walking the CLI command tree.

  Attributes:
    _root: The root element of the CLI tree.
    _num_visited: The count of visited nodes so far.
  """

  def __init__(self, cli):
    """Constructor.

    Args:
      cli: calliope.cli.CLI, The CLI whose tree is walked.
    """
    self._cli = cli
    self._root = cli.top_element
    self._num_visited = 0

  def Walk(self, hidden=False, restrict=None):
    """Calls self.Visit() on each node in the CLI tree.

    The walk is DFS, ordered by command name for reproducability. The builtin
    help commands are skipped.

    Args:
      hidden: Include hidden groups and commands if True.
      restrict: Restricts the walk to the command/group dotted paths in this
        list. For example, restrict=['triton.instances'] restricts the walk to
        the 'triton instances' group and its commands.

    Returns:
      The return value of the top level Visit() call.
    """
    def _Include(command, traverse=False):
      """Determines if command should be included in the walk.

      Args:
        command: CommandCommon command node.
        traverse: If True then check traversal through group to subcommands.

      Returns:
        True if command should be included in the walk.
      """
      if command.is_builtin:
        return False
      if not hidden and command.IsHidden():
        return False
      if not restrict:
        return True
      path = '.'.join(command.GetPath())
      for item in restrict:
        if path.startswith(item):
          return True
        if traverse and item.startswith(path):
          return True
      return False

    def _Walk(node, parent):
      """Walk() helper that calls self.Visit() on each node in the CLI tree.

      Args:
        node: CommandCommon tree node.
        parent: The parent Visit() return value, None at the top level.

      Returns:
        The return value of the outer Visit() call.
      """
      if not node.is_group:
        return self._Visit(node, parent, is_group=False)
      parent = self._Visit(node, parent, is_group=True)
      commands_and_groups = []
      for name, command in node.commands.items():
        if _Include(command):
          commands_and_groups.append((name, command, False))
      for name, command in node.groups.items():
        if _Include(command, traverse=True):
          commands_and_groups.append((name, command, True))
      for _, command, is_group in sorted(commands_and_groups,
                                         key=lambda x: (x[0], x[2])):
        if is_group:
          _Walk(command, parent)
        else:
          self._Visit(command, parent, is_group=False)
      return parent

    self._num_visited = 0
    parent = _Walk(self._root, self.Init())
    self.Done()
    return parent

  @property
  def num_visited(self):
    return self._num_visited

  def _Visit(self, node, parent, is_group):
    self._num_visited += 1
    return self.Visit(node, parent, is_group)

  def Visit(self, node, parent, is_group):
    """Visits each node in the CLI command tree.

    Called preorder by Walk() using DFS.

    Args:
      node: group/command CommandCommon info.
      parent: The parent Visit() return value, None at the top level.
      is_group: True if node is a group, otherwise its is a command.

    Returns:
      A new parent value for the node subtree. This value is the parent arg
      for the Visit() calls for the children of this node.
    """
    pass

  def Init(self):
    """Sets up before any node in the CLI tree has been visited.

    Returns:
      The initial parent value for the first Visit() call.
    """
    return None

  def Done(self):
    """Cleans up after all nodes in the CLI tree have been visited."""
    pass
