"""
Bundled donger table.

Category name -> emoticons. Used when CONTENT_TABLE_PATH is not set.
"""

DONGERS = {
    "happy": [
        "ヽ(´▽`)/",
        "(ﾉ◕ヮ◕)ﾉ*:･ﾟ✧",
        "ヾ(＾∇＾)",
        "(ᵔᴥᵔ)",
        "☜(⌒▽⌒)☞",
    ],
    "sad": [
        "(╥﹏╥)",
        "(ಥ﹏ಥ)",
        "(︶︹︺)",
        "ヽ(´□｀。)ﾉ",
    ],
    "angry": [
        "(╯°□°）╯︵ ┻━┻",
        "ლ(ಠ益ಠლ)",
        "(ノಠ益ಠ)ノ彡┻━┻",
        "ヽ(`⌒´メ)ノ",
    ],
    "shrug": [
        "¯\\_(ツ)_/¯",
        "┐(´ー｀)┌",
        "ヽ(ー_ー )ノ",
    ],
    "dance": [
        "♪┏(・o･)┛♪┗ ( ･o･) ┓♪",
        "└[∵┌]└[ ∵ ]┘[┐∵]┘",
        "ヘ(￣ー￣ヘ)",
    ],
    "cat": [
        "(=^･ω･^=)",
        "ฅ^•ﻌ•^ฅ",
        "(^・ω・^ )",
        "=^..^=",
    ],
    "bear": [
        "ʕ•ᴥ•ʔ",
        "ʕ ᵔᴥᵔ ʔ",
        "ʕノ•ᴥ•ʔノ ︵ ┻━┻",
    ],
}
