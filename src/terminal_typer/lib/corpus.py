"""
Built-in word lists, selectable by name with `game.corpus`.
"""

LOREM = """
lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod tempor
incididunt ut labore et dolore magna aliqua enim ad minim veniam quis nostrud
exercitation ullamco laboris nisi aliquip ex ea commodo consequat duis aute
irure in reprehenderit voluptate velit esse cillum fugiat nulla pariatur
excepteur sint occaecat cupidatat non proident sunt culpa qui officia deserunt
mollit anim id est laborum
"""

ENGLISH = """
the be to of and a in that have it for not on with he as you do at this but his
by from they we say her she or an will my one all would there their what so up
out if about who get which go me when make can like time no just him know take
people into year your good some could them see other than then now look only
come its over think also back after use two how our work first well way even new
want because any these give day most us great between need large often hand high
place hold turn small number off always move live found answer school grow study
still learn plant cover food sun four state keep eye never last let thought city
tree cross farm hard start might story saw far sea draw left late run while press
close night real life few north open seem together next white children begin got
walk example ease paper group music those both mark book letter until mile river
car feet care second enough plain girl usual young ready above ever red list
though feel talk bird soon body dog family direct pose leave song measure door
"""

BUILTIN_CORPORA: dict[str, str] = {
    "lorem": LOREM,
    "english": ENGLISH,
}
