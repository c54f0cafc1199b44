"""
Curated morpheme tables used by the etymology segmenter.

Each entry pairs a literal spelling with an English and a Chinese gloss.
Table order matters: when two patterns of the same length both match,
the one listed first wins (see `by_length`).
"""

from typing import List, Sequence

from easydict.models.analysis_models import MorphemeEntry

PREFIXES: Sequence[MorphemeEntry] = (
    # Negative prefixes
    MorphemeEntry("un", "not, opposite", "不，相反"),
    MorphemeEntry("dis", "not, opposite, apart", "不，相反，分开"),
    MorphemeEntry("in", "not, into", "不，进入"),
    MorphemeEntry("im", "not, into", "不，进入"),
    MorphemeEntry("il", "not", "不"),
    MorphemeEntry("ir", "not", "不"),
    MorphemeEntry("non", "not", "非，不"),
    MorphemeEntry("mis", "wrong, badly", "错误地"),
    MorphemeEntry("mal", "bad, wrong", "坏，错误"),
    MorphemeEntry("anti", "against, opposite", "反对，抗"),
    MorphemeEntry("contra", "against", "反对"),
    MorphemeEntry("counter", "against, opposite", "反对，相反"),

    # Direction/Position prefixes
    MorphemeEntry("ab", "away from", "离开"),
    MorphemeEntry("ad", "to, toward", "向，朝"),
    MorphemeEntry("circum", "around", "围绕"),
    MorphemeEntry("com", "with, together", "共同，一起"),
    MorphemeEntry("con", "with, together", "共同，一起"),
    MorphemeEntry("col", "with, together", "共同，一起"),
    MorphemeEntry("cor", "with, together", "共同，一起"),
    MorphemeEntry("co", "with, together", "共同，一起"),
    MorphemeEntry("de", "down, away, remove", "向下，去除"),
    MorphemeEntry("dia", "through, across", "穿过"),
    MorphemeEntry("ex", "out, former", "出，前"),
    MorphemeEntry("extra", "beyond, outside", "超出，外"),
    MorphemeEntry("infra", "below", "在…下"),
    MorphemeEntry("inter", "between, among", "在…之间"),
    MorphemeEntry("intra", "within", "在…内"),
    MorphemeEntry("intro", "into, inward", "向内"),
    MorphemeEntry("ob", "against, toward", "反对，朝向"),
    MorphemeEntry("para", "beside, beyond", "旁边，超越"),
    MorphemeEntry("per", "through, thorough", "穿过，彻底"),
    MorphemeEntry("peri", "around", "围绕"),
    MorphemeEntry("post", "after", "在…之后"),
    MorphemeEntry("pre", "before", "在…之前"),
    MorphemeEntry("pro", "forward, for, before", "向前，支持"),
    MorphemeEntry("re", "again, back", "再，重新"),
    MorphemeEntry("retro", "backward", "向后"),
    MorphemeEntry("se", "apart, away", "分开"),
    MorphemeEntry("sub", "under, below", "在…下"),
    MorphemeEntry("suc", "under", "在…下"),
    MorphemeEntry("suf", "under", "在…下"),
    MorphemeEntry("sup", "under", "在…下"),
    MorphemeEntry("sus", "under", "在…下"),
    MorphemeEntry("super", "above, beyond", "超级，在…上"),
    MorphemeEntry("supra", "above", "在…上"),
    MorphemeEntry("sur", "over, above", "在…上"),
    MorphemeEntry("syn", "together, with", "共同"),
    MorphemeEntry("sym", "together, with", "共同"),
    MorphemeEntry("trans", "across, beyond", "跨越，穿过"),
    MorphemeEntry("ultra", "beyond, extreme", "超越，极端"),

    # Size/Degree prefixes
    MorphemeEntry("hyper", "over, excessive", "过度，超"),
    MorphemeEntry("hypo", "under, below", "低于，不足"),
    MorphemeEntry("macro", "large", "大，宏观"),
    MorphemeEntry("mega", "large, million", "大，百万"),
    MorphemeEntry("micro", "small", "小，微"),
    MorphemeEntry("mini", "small", "小，迷你"),
    MorphemeEntry("out", "beyond, more", "超过，在外"),
    MorphemeEntry("over", "too much, above", "过度，在…上"),
    MorphemeEntry("under", "below, insufficient", "在…下，不足"),

    # Number prefixes
    MorphemeEntry("uni", "one", "单一"),
    MorphemeEntry("mono", "one, single", "单一"),
    MorphemeEntry("bi", "two", "双，二"),
    MorphemeEntry("di", "two", "双，二"),
    MorphemeEntry("tri", "three", "三"),
    MorphemeEntry("quad", "four", "四"),
    MorphemeEntry("quart", "four", "四"),
    MorphemeEntry("pent", "five", "五"),
    MorphemeEntry("quint", "five", "五"),
    MorphemeEntry("hex", "six", "六"),
    MorphemeEntry("hept", "seven", "七"),
    MorphemeEntry("sept", "seven", "七"),
    MorphemeEntry("oct", "eight", "八"),
    MorphemeEntry("nov", "nine", "九"),
    MorphemeEntry("dec", "ten", "十"),
    MorphemeEntry("cent", "hundred", "百"),
    MorphemeEntry("kilo", "thousand", "千"),
    MorphemeEntry("milli", "thousand, thousandth", "千，千分之一"),
    MorphemeEntry("semi", "half", "半"),
    MorphemeEntry("hemi", "half", "半"),
    MorphemeEntry("demi", "half", "半"),
    MorphemeEntry("multi", "many", "多"),
    MorphemeEntry("poly", "many", "多"),

    # Learned combining forms
    MorphemeEntry("auto", "self", "自动，自己"),
    MorphemeEntry("bene", "good, well", "好"),
    MorphemeEntry("bio", "life", "生命"),
    MorphemeEntry("chrono", "time", "时间"),
    MorphemeEntry("cyber", "computer", "网络，计算机"),
    MorphemeEntry("eco", "environment", "生态，环境"),
    MorphemeEntry("electro", "electric", "电"),
    MorphemeEntry("geo", "earth", "地球"),
    MorphemeEntry("hetero", "different", "不同"),
    MorphemeEntry("homo", "same", "相同"),
    MorphemeEntry("hydro", "water", "水"),
    MorphemeEntry("neo", "new", "新"),
    MorphemeEntry("neuro", "nerve", "神经"),
    MorphemeEntry("pan", "all", "全，泛"),
    MorphemeEntry("phil", "love", "爱"),
    MorphemeEntry("philo", "love", "爱"),
    MorphemeEntry("photo", "light", "光"),
    MorphemeEntry("pseudo", "false", "假，伪"),
    MorphemeEntry("psycho", "mind", "心理"),
    MorphemeEntry("socio", "society", "社会"),
    MorphemeEntry("techno", "technology", "技术"),
    MorphemeEntry("tele", "far, distant", "远"),
    MorphemeEntry("thermo", "heat", "热"),
    MorphemeEntry("vice", "deputy", "副"),

    # Time prefixes
    MorphemeEntry("ante", "before", "在…之前"),
    MorphemeEntry("fore", "before, front", "在…前"),
    MorphemeEntry("mid", "middle", "中间"),

    # Attitude prefixes
    MorphemeEntry("eu", "good, well", "好"),
    MorphemeEntry("dys", "bad, difficult", "坏，困难"),
)

ROOTS: Sequence[MorphemeEntry] = (
    # A
    MorphemeEntry("act", "do, drive", "做，驱动"),
    MorphemeEntry("ag", "do, act", "做，行动"),
    MorphemeEntry("agr", "field, farm", "田地，农业"),
    MorphemeEntry("ali", "other", "其他"),
    MorphemeEntry("alter", "other, change", "其他，改变"),
    MorphemeEntry("am", "love", "爱"),
    MorphemeEntry("anim", "life, spirit", "生命，精神"),
    MorphemeEntry("ann", "year", "年"),
    MorphemeEntry("enn", "year", "年"),
    MorphemeEntry("anth", "flower", "花"),
    MorphemeEntry("anthrop", "human", "人类"),
    MorphemeEntry("apt", "fit", "适合"),
    MorphemeEntry("aqu", "water", "水"),
    MorphemeEntry("arch", "chief, rule", "首领，统治"),
    MorphemeEntry("art", "skill", "技艺"),
    MorphemeEntry("aster", "star", "星"),
    MorphemeEntry("astr", "star", "星"),
    MorphemeEntry("aud", "hear", "听"),
    MorphemeEntry("aug", "increase", "增加"),

    # B
    MorphemeEntry("bar", "weight, pressure", "重量，压力"),
    MorphemeEntry("bas", "low, base", "低，基础"),
    MorphemeEntry("believ", "believe, trust", "相信"),
    MorphemeEntry("bell", "war", "战争"),
    MorphemeEntry("bibl", "book", "书"),
    MorphemeEntry("bio", "life", "生命"),
    MorphemeEntry("brev", "short", "短"),

    # C
    MorphemeEntry("cad", "fall", "落下"),
    MorphemeEntry("cas", "fall", "落下"),
    MorphemeEntry("cid", "fall", "落下"),
    MorphemeEntry("cap", "head", "头"),
    MorphemeEntry("capit", "head", "头"),
    MorphemeEntry("capt", "take, seize", "拿，抓"),
    MorphemeEntry("cept", "take, seize", "拿，抓"),
    MorphemeEntry("ceiv", "take, seize", "拿，抓"),
    MorphemeEntry("cip", "take, seize", "拿，抓"),
    MorphemeEntry("carn", "flesh", "肉"),
    MorphemeEntry("ced", "go, yield", "走，让步"),
    MorphemeEntry("ceed", "go, yield", "走，让步"),
    MorphemeEntry("cess", "go, yield", "走，让步"),
    MorphemeEntry("centr", "center", "中心"),
    MorphemeEntry("cert", "sure", "确定"),
    MorphemeEntry("chron", "time", "时间"),
    MorphemeEntry("cide", "kill, cut", "杀，切"),
    MorphemeEntry("cis", "cut", "切"),
    MorphemeEntry("cit", "call, arouse", "叫，唤起"),
    MorphemeEntry("civ", "citizen", "公民"),
    MorphemeEntry("claim", "cry out", "喊叫"),
    MorphemeEntry("clam", "cry out", "喊叫"),
    MorphemeEntry("clar", "clear", "清楚"),
    MorphemeEntry("clin", "lean, bend", "倾斜"),
    MorphemeEntry("clos", "close", "关闭"),
    MorphemeEntry("clud", "close", "关闭"),
    MorphemeEntry("clus", "close", "关闭"),
    MorphemeEntry("cogn", "know", "知道"),
    MorphemeEntry("cord", "heart", "心"),
    MorphemeEntry("corp", "body", "身体"),
    MorphemeEntry("cosm", "universe, order", "宇宙，秩序"),
    MorphemeEntry("crat", "rule, power", "统治，权力"),
    MorphemeEntry("cre", "create, grow", "创造，生长"),
    MorphemeEntry("creat", "create", "创造"),
    MorphemeEntry("cred", "believe, trust", "相信，信任"),
    MorphemeEntry("cresc", "grow", "生长"),
    MorphemeEntry("crit", "judge", "判断"),
    MorphemeEntry("crypt", "hidden", "隐藏"),
    MorphemeEntry("cult", "care, grow", "培养，种植"),
    MorphemeEntry("cur", "care", "关心"),
    MorphemeEntry("cure", "care", "关心"),
    MorphemeEntry("curs", "run", "跑"),
    MorphemeEntry("curr", "run", "跑"),
    MorphemeEntry("cours", "run", "跑"),
    MorphemeEntry("cycl", "circle", "圆，循环"),

    # D
    MorphemeEntry("dec", "ten", "十"),
    MorphemeEntry("dem", "people", "人民"),
    MorphemeEntry("dent", "tooth", "牙齿"),
    MorphemeEntry("derm", "skin", "皮肤"),
    MorphemeEntry("dic", "say, speak", "说"),
    MorphemeEntry("dict", "say, speak", "说"),
    MorphemeEntry("dign", "worthy", "值得"),
    MorphemeEntry("doc", "teach", "教"),
    MorphemeEntry("doct", "teach", "教"),
    MorphemeEntry("dom", "house, control", "房屋，控制"),
    MorphemeEntry("don", "give", "给"),
    MorphemeEntry("donat", "give", "给"),
    MorphemeEntry("dorm", "sleep", "睡"),
    MorphemeEntry("dox", "opinion, belief", "观点，信仰"),
    MorphemeEntry("draw", "pull", "拉"),
    MorphemeEntry("du", "two", "二"),
    MorphemeEntry("duc", "lead", "引导"),
    MorphemeEntry("duct", "lead", "引导"),
    MorphemeEntry("dur", "hard, lasting", "硬，持久"),
    MorphemeEntry("dyn", "power", "力量"),
    MorphemeEntry("dynam", "power", "力量"),

    # E
    MorphemeEntry("equ", "equal", "相等"),
    MorphemeEntry("erg", "work", "工作"),
    MorphemeEntry("err", "wander, mistake", "漫游，错误"),
    MorphemeEntry("ev", "age, time", "时代"),

    # F
    MorphemeEntry("fab", "speak", "说"),
    MorphemeEntry("fac", "make, do", "做，制造"),
    MorphemeEntry("fact", "make, do", "做，制造"),
    MorphemeEntry("fect", "make, do", "做，制造"),
    MorphemeEntry("fic", "make, do", "做，制造"),
    MorphemeEntry("fall", "deceive", "欺骗"),
    MorphemeEntry("fals", "deceive", "欺骗"),
    MorphemeEntry("fam", "fame, report", "名声"),
    MorphemeEntry("fer", "carry, bring", "带，携带"),
    MorphemeEntry("fid", "faith, trust", "信任"),
    MorphemeEntry("fig", "shape, form", "形状"),
    MorphemeEntry("fin", "end, limit", "结束，限制"),
    MorphemeEntry("firm", "strong", "坚固"),
    MorphemeEntry("fix", "fasten", "固定"),
    MorphemeEntry("flam", "burn", "燃烧"),
    MorphemeEntry("flect", "bend", "弯曲"),
    MorphemeEntry("flex", "bend", "弯曲"),
    MorphemeEntry("flict", "strike", "打击"),
    MorphemeEntry("flor", "flower", "花"),
    MorphemeEntry("flu", "flow", "流"),
    MorphemeEntry("flux", "flow", "流"),
    MorphemeEntry("form", "shape", "形状"),
    MorphemeEntry("fort", "strong", "强壮"),
    MorphemeEntry("forc", "strong", "强壮"),
    MorphemeEntry("frag", "break", "打破"),
    MorphemeEntry("fract", "break", "打破"),
    MorphemeEntry("fug", "flee", "逃"),
    MorphemeEntry("funct", "perform", "执行"),
    MorphemeEntry("fund", "base, bottom", "基础，底部"),
    MorphemeEntry("fus", "pour, melt", "倾倒，融化"),

    # G
    MorphemeEntry("gam", "marriage", "婚姻"),
    MorphemeEntry("gen", "birth, produce", "出生，产生"),
    MorphemeEntry("ger", "carry", "携带"),
    MorphemeEntry("gest", "carry", "携带"),
    MorphemeEntry("gnos", "know", "知道"),
    MorphemeEntry("grad", "step, degree", "步，程度"),
    MorphemeEntry("gress", "step, go", "步，走"),
    MorphemeEntry("gram", "write, letter", "写，字母"),
    MorphemeEntry("graph", "write", "写"),
    MorphemeEntry("grat", "pleasing", "令人愉快"),
    MorphemeEntry("grav", "heavy", "重"),
    MorphemeEntry("greg", "flock, group", "群"),
    MorphemeEntry("gyn", "woman", "女人"),

    # H
    MorphemeEntry("hab", "have, hold", "有，持有"),
    MorphemeEntry("habit", "have, live", "有，居住"),
    MorphemeEntry("hap", "luck, chance", "运气"),
    MorphemeEntry("heli", "sun", "太阳"),
    MorphemeEntry("hem", "blood", "血"),
    MorphemeEntry("her", "heir", "继承人"),
    MorphemeEntry("hes", "stick", "粘"),
    MorphemeEntry("hibit", "hold, have", "持有"),
    MorphemeEntry("hom", "man, human", "人"),
    MorphemeEntry("hor", "hour", "小时"),
    MorphemeEntry("hum", "earth, ground", "土地"),
    MorphemeEntry("human", "human", "人类"),

    # I-J
    MorphemeEntry("ident", "same", "相同"),
    MorphemeEntry("ign", "fire", "火"),
    MorphemeEntry("imag", "likeness", "相似"),
    MorphemeEntry("init", "begin", "开始"),
    MorphemeEntry("integr", "whole", "完整"),
    MorphemeEntry("it", "go", "走"),
    MorphemeEntry("ject", "throw", "投，扔"),
    MorphemeEntry("join", "join", "连接"),
    MorphemeEntry("junct", "join", "连接"),
    MorphemeEntry("jud", "judge", "判断"),
    MorphemeEntry("judic", "judge", "判断"),
    MorphemeEntry("jur", "swear, law", "发誓，法律"),
    MorphemeEntry("jus", "law, right", "法律，权利"),
    MorphemeEntry("just", "law, right", "法律，正义"),
    MorphemeEntry("juven", "young", "年轻"),

    # L
    MorphemeEntry("labor", "work", "工作"),
    MorphemeEntry("lat", "carry, bear", "携带"),
    MorphemeEntry("later", "side", "侧面"),
    MorphemeEntry("lav", "wash", "洗"),
    MorphemeEntry("lect", "choose, read", "选择，读"),
    MorphemeEntry("leg", "law, read", "法律，读"),
    MorphemeEntry("lev", "light, rise", "轻，升起"),
    MorphemeEntry("liber", "free", "自由"),
    MorphemeEntry("libr", "book", "书"),
    MorphemeEntry("lic", "permit", "允许"),
    MorphemeEntry("lig", "bind", "绑"),
    MorphemeEntry("lim", "limit", "限制"),
    MorphemeEntry("lin", "line", "线"),
    MorphemeEntry("lingu", "language, tongue", "语言，舌头"),
    MorphemeEntry("lit", "letter", "文字"),
    MorphemeEntry("liter", "letter", "文字"),
    MorphemeEntry("loc", "place", "地方"),
    MorphemeEntry("log", "word, study, reason", "词，学科，理性"),
    MorphemeEntry("loqu", "speak", "说"),
    MorphemeEntry("luc", "light", "光"),
    MorphemeEntry("lud", "play", "玩"),
    MorphemeEntry("lus", "play", "玩"),
    MorphemeEntry("lum", "light", "光"),
    MorphemeEntry("lumin", "light", "光"),

    # M
    MorphemeEntry("magn", "great", "大"),
    MorphemeEntry("maj", "greater", "更大"),
    MorphemeEntry("man", "hand", "手"),
    MorphemeEntry("manu", "hand", "手"),
    MorphemeEntry("mand", "order", "命令"),
    MorphemeEntry("mar", "sea", "海"),
    MorphemeEntry("mater", "mother", "母亲"),
    MorphemeEntry("matr", "mother", "母亲"),
    MorphemeEntry("medi", "middle", "中间"),
    MorphemeEntry("med", "heal", "治愈"),
    MorphemeEntry("mem", "remember", "记忆"),
    MorphemeEntry("memor", "remember", "记忆"),
    MorphemeEntry("ment", "mind", "思想"),
    MorphemeEntry("merc", "trade", "贸易"),
    MorphemeEntry("merg", "dip, plunge", "浸入"),
    MorphemeEntry("mers", "dip, plunge", "浸入"),
    MorphemeEntry("meter", "measure", "测量"),
    MorphemeEntry("metr", "measure", "测量"),
    MorphemeEntry("migr", "move", "迁移"),
    MorphemeEntry("min", "small, less", "小，少"),
    MorphemeEntry("mir", "wonder", "惊奇"),
    MorphemeEntry("mis", "send", "发送"),
    MorphemeEntry("miss", "send", "发送"),
    MorphemeEntry("mit", "send", "发送"),
    MorphemeEntry("mob", "move", "移动"),
    MorphemeEntry("mod", "manner, measure", "方式，测量"),
    MorphemeEntry("mon", "warn, remind", "警告，提醒"),
    MorphemeEntry("monstr", "show", "显示"),
    MorphemeEntry("mor", "custom, manner", "习俗，方式"),
    MorphemeEntry("morph", "form, shape", "形状"),
    MorphemeEntry("mort", "death", "死亡"),
    MorphemeEntry("mot", "move", "移动"),
    MorphemeEntry("mov", "move", "移动"),
    MorphemeEntry("mun", "service, gift", "服务，礼物"),
    MorphemeEntry("mut", "change", "改变"),

    # N
    MorphemeEntry("nasc", "born", "出生"),
    MorphemeEntry("nat", "born", "出生"),
    MorphemeEntry("nav", "ship", "船"),
    MorphemeEntry("nect", "bind", "绑"),
    MorphemeEntry("neg", "deny", "否认"),
    MorphemeEntry("neur", "nerve", "神经"),
    MorphemeEntry("noc", "harm", "伤害"),
    MorphemeEntry("nox", "harm", "伤害"),
    MorphemeEntry("nom", "name, law", "名字，法则"),
    MorphemeEntry("nomin", "name", "名字"),
    MorphemeEntry("norm", "rule", "规则"),
    MorphemeEntry("not", "know, mark", "知道，标记"),
    MorphemeEntry("noun", "declare", "宣布"),
    MorphemeEntry("nounce", "declare", "宣布"),
    MorphemeEntry("nov", "new", "新"),
    MorphemeEntry("numer", "number", "数字"),
    MorphemeEntry("nutr", "nourish", "滋养"),

    # O-P
    MorphemeEntry("oct", "eight", "八"),
    MorphemeEntry("ocul", "eye", "眼睛"),
    MorphemeEntry("oper", "work", "工作"),
    MorphemeEntry("opt", "best, choose", "最好，选择"),
    MorphemeEntry("ora", "speak, pray", "说，祈祷"),
    MorphemeEntry("ord", "order", "顺序"),
    MorphemeEntry("organ", "tool, organ", "工具，器官"),
    MorphemeEntry("ori", "rise", "升起"),
    MorphemeEntry("orn", "decorate", "装饰"),
    MorphemeEntry("pac", "peace", "和平"),
    MorphemeEntry("par", "equal", "相等"),
    MorphemeEntry("part", "part", "部分"),
    MorphemeEntry("pass", "feel, suffer", "感受，遭受"),
    MorphemeEntry("path", "feeling, disease", "感情，疾病"),
    MorphemeEntry("patr", "father", "父亲"),
    MorphemeEntry("pater", "father", "父亲"),
    MorphemeEntry("ped", "foot, child", "脚，儿童"),
    MorphemeEntry("pel", "drive, push", "驱动，推"),
    MorphemeEntry("puls", "drive, push", "驱动，推"),
    MorphemeEntry("pen", "punish", "惩罚"),
    MorphemeEntry("pend", "hang, weigh", "悬挂，称重"),
    MorphemeEntry("pens", "hang, weigh", "悬挂，称重"),
    MorphemeEntry("pet", "seek", "寻求"),
    MorphemeEntry("phas", "show", "显示"),
    MorphemeEntry("phen", "show", "显示"),
    MorphemeEntry("phil", "love", "爱"),
    MorphemeEntry("phob", "fear", "恐惧"),
    MorphemeEntry("phon", "sound", "声音"),
    MorphemeEntry("phor", "carry", "携带"),
    MorphemeEntry("photo", "light", "光"),
    MorphemeEntry("phys", "nature, body", "自然，身体"),
    MorphemeEntry("plac", "please", "取悦"),
    MorphemeEntry("plan", "flat", "平的"),
    MorphemeEntry("plas", "form, mold", "形成，塑造"),
    MorphemeEntry("ple", "fill", "填充"),
    MorphemeEntry("plen", "full", "满"),
    MorphemeEntry("plex", "fold", "折叠"),
    MorphemeEntry("plic", "fold", "折叠"),
    MorphemeEntry("ply", "fold", "折叠"),
    MorphemeEntry("pod", "foot", "脚"),
    MorphemeEntry("poli", "city, citizen", "城市，公民"),
    MorphemeEntry("polit", "citizen", "公民"),
    MorphemeEntry("pon", "place, put", "放置"),
    MorphemeEntry("pos", "place, put", "放置"),
    MorphemeEntry("posit", "place, put", "放置"),
    MorphemeEntry("pot", "power", "力量"),
    MorphemeEntry("poten", "power", "力量"),
    MorphemeEntry("prec", "price", "价格"),
    MorphemeEntry("press", "press", "压"),
    MorphemeEntry("prim", "first", "第一"),
    MorphemeEntry("prin", "first", "第一"),
    MorphemeEntry("priv", "separate", "分开"),
    MorphemeEntry("prob", "prove, test", "证明，测试"),
    MorphemeEntry("prov", "prove, test", "证明，测试"),
    MorphemeEntry("proto", "first", "第一"),
    MorphemeEntry("psych", "mind, soul", "心理，灵魂"),
    MorphemeEntry("punct", "point", "点"),
    MorphemeEntry("pur", "pure", "纯净"),
    MorphemeEntry("put", "think", "思考"),

    # Q-R
    MorphemeEntry("quer", "ask, seek", "问，寻求"),
    MorphemeEntry("quest", "ask, seek", "问，寻求"),
    MorphemeEntry("quir", "ask, seek", "问，寻求"),
    MorphemeEntry("quiet", "rest", "安静"),
    MorphemeEntry("radi", "ray, spoke", "光线，辐射"),
    MorphemeEntry("rat", "think, reason", "思考，理性"),
    MorphemeEntry("real", "thing", "事物"),
    MorphemeEntry("rect", "right, straight", "正确，直"),
    MorphemeEntry("reg", "rule, king", "统治，王"),
    MorphemeEntry("rog", "ask", "问"),
    MorphemeEntry("rupt", "break", "打破"),

    # S
    MorphemeEntry("sacr", "holy", "神圣"),
    MorphemeEntry("sanct", "holy", "神圣"),
    MorphemeEntry("san", "health", "健康"),
    MorphemeEntry("sat", "enough", "足够"),
    MorphemeEntry("sci", "know", "知道"),
    MorphemeEntry("scop", "see, watch", "看，观察"),
    MorphemeEntry("scrib", "write", "写"),
    MorphemeEntry("script", "write", "写"),
    MorphemeEntry("sec", "cut", "切"),
    MorphemeEntry("sect", "cut", "切"),
    MorphemeEntry("secu", "follow", "跟随"),
    MorphemeEntry("sequ", "follow", "跟随"),
    MorphemeEntry("sed", "sit, settle", "坐，安顿"),
    MorphemeEntry("sess", "sit", "坐"),
    MorphemeEntry("sid", "sit", "坐"),
    MorphemeEntry("sen", "old", "老"),
    MorphemeEntry("sens", "feel", "感觉"),
    MorphemeEntry("sent", "feel", "感觉"),
    MorphemeEntry("sert", "join", "连接"),
    MorphemeEntry("serv", "serve, keep", "服务，保持"),
    MorphemeEntry("sign", "mark", "标记"),
    MorphemeEntry("simil", "like", "相似"),
    MorphemeEntry("simul", "like", "相似"),
    MorphemeEntry("sist", "stand", "站立"),
    MorphemeEntry("soci", "companion", "同伴"),
    MorphemeEntry("sol", "alone, sun", "单独，太阳"),
    MorphemeEntry("solv", "loosen", "解开"),
    MorphemeEntry("solut", "loosen", "解开"),
    MorphemeEntry("somn", "sleep", "睡眠"),
    MorphemeEntry("son", "sound", "声音"),
    MorphemeEntry("soph", "wise", "智慧"),
    MorphemeEntry("spec", "look, see", "看"),
    MorphemeEntry("spect", "look, see", "看"),
    MorphemeEntry("spir", "breathe", "呼吸"),
    MorphemeEntry("spond", "promise", "承诺"),
    MorphemeEntry("spons", "promise", "承诺"),
    MorphemeEntry("sta", "stand", "站立"),
    MorphemeEntry("stat", "stand", "站立"),
    MorphemeEntry("strain", "draw tight", "拉紧"),
    MorphemeEntry("strict", "draw tight", "拉紧"),
    MorphemeEntry("struct", "build", "建造"),
    MorphemeEntry("stud", "eager", "热心"),
    MorphemeEntry("sum", "take, highest", "拿，最高"),

    # T
    MorphemeEntry("tac", "silent", "沉默"),
    MorphemeEntry("tact", "touch", "触摸"),
    MorphemeEntry("tag", "touch", "触摸"),
    MorphemeEntry("tang", "touch", "触摸"),
    MorphemeEntry("tain", "hold", "保持"),
    MorphemeEntry("ten", "hold", "保持"),
    MorphemeEntry("tin", "hold", "保持"),
    MorphemeEntry("techn", "skill", "技术"),
    MorphemeEntry("tect", "cover", "覆盖"),
    MorphemeEntry("tele", "far", "远"),
    MorphemeEntry("tempor", "time", "时间"),
    MorphemeEntry("tend", "stretch", "伸展"),
    MorphemeEntry("tens", "stretch", "伸展"),
    MorphemeEntry("tent", "stretch", "伸展"),
    MorphemeEntry("term", "end, limit", "结束，限制"),
    MorphemeEntry("termin", "end, limit", "结束，限制"),
    MorphemeEntry("terr", "earth, land", "地，土地"),
    MorphemeEntry("test", "witness", "见证"),
    MorphemeEntry("text", "weave", "编织"),
    MorphemeEntry("the", "god", "神"),
    MorphemeEntry("theo", "god", "神"),
    MorphemeEntry("therm", "heat", "热"),
    MorphemeEntry("thes", "put, place", "放置"),
    MorphemeEntry("tom", "cut", "切"),
    MorphemeEntry("ton", "tone, sound", "音调，声音"),
    MorphemeEntry("tor", "twist", "扭"),
    MorphemeEntry("tort", "twist", "扭"),
    MorphemeEntry("tox", "poison", "毒"),
    MorphemeEntry("tract", "pull, drag", "拉，拖"),
    MorphemeEntry("trib", "give", "给"),
    MorphemeEntry("trud", "push", "推"),
    MorphemeEntry("trus", "push", "推"),
    MorphemeEntry("turb", "disturb", "扰乱"),
    MorphemeEntry("typ", "type", "类型"),

    # U-V-W
    MorphemeEntry("ultim", "last", "最后"),
    MorphemeEntry("umbr", "shadow", "阴影"),
    MorphemeEntry("un", "one", "一"),
    MorphemeEntry("und", "wave", "波浪"),
    MorphemeEntry("uni", "one", "一"),
    MorphemeEntry("urb", "city", "城市"),
    MorphemeEntry("us", "use", "使用"),
    MorphemeEntry("ut", "use", "使用"),
    MorphemeEntry("util", "use", "使用"),
    MorphemeEntry("vac", "empty", "空"),
    MorphemeEntry("vad", "go", "走"),
    MorphemeEntry("val", "strong, worth", "强壮，价值"),
    MorphemeEntry("valu", "worth", "价值"),
    MorphemeEntry("var", "change", "改变"),
    MorphemeEntry("vari", "change", "改变"),
    MorphemeEntry("ven", "come", "来"),
    MorphemeEntry("vent", "come", "来"),
    MorphemeEntry("ver", "true", "真实"),
    MorphemeEntry("verb", "word", "词"),
    MorphemeEntry("verg", "turn", "转"),
    MorphemeEntry("vers", "turn", "转"),
    MorphemeEntry("vert", "turn", "转"),
    MorphemeEntry("vest", "clothe", "穿衣"),
    MorphemeEntry("vi", "way", "道路"),
    MorphemeEntry("via", "way", "道路"),
    MorphemeEntry("vid", "see", "看"),
    MorphemeEntry("vis", "see", "看"),
    MorphemeEntry("view", "see", "看"),
    MorphemeEntry("vict", "conquer", "征服"),
    MorphemeEntry("vinc", "conquer", "征服"),
    MorphemeEntry("vir", "man", "男人"),
    MorphemeEntry("vit", "life", "生命"),
    MorphemeEntry("viv", "live", "活"),
    MorphemeEntry("voc", "voice, call", "声音，叫"),
    MorphemeEntry("vok", "call", "叫"),
    MorphemeEntry("vol", "will, wish", "意愿"),
    MorphemeEntry("volv", "roll", "滚动"),
    MorphemeEntry("vor", "eat", "吃"),
    MorphemeEntry("vot", "vow", "发誓"),
    MorphemeEntry("zo", "animal", "动物"),
)

SUFFIXES: Sequence[MorphemeEntry] = (
    # Noun suffixes - Person
    MorphemeEntry("er", "one who", "…的人"),
    MorphemeEntry("or", "one who", "…的人"),
    MorphemeEntry("ar", "one who", "…的人"),
    MorphemeEntry("ist", "one who practices", "…者"),
    MorphemeEntry("ian", "one who", "…人"),
    MorphemeEntry("ant", "one who", "…的人"),
    MorphemeEntry("ent", "one who", "…的人"),
    MorphemeEntry("ee", "one who receives", "被…的人"),
    MorphemeEntry("eer", "one who", "…者"),
    MorphemeEntry("ess", "female", "女性"),
    MorphemeEntry("ster", "one who", "…者"),

    # Noun suffixes - State/Quality
    MorphemeEntry("tion", "act, state", "…行为，状态"),
    MorphemeEntry("sion", "act, state", "…行为，状态"),
    MorphemeEntry("ation", "act, process", "…行为"),
    MorphemeEntry("ition", "act, state", "…行为，状态"),
    MorphemeEntry("ment", "act, state", "…行为"),
    MorphemeEntry("ness", "state, quality", "…状态"),
    MorphemeEntry("ity", "state, quality", "…性"),
    MorphemeEntry("ty", "state, quality", "…性"),
    MorphemeEntry("ance", "state, quality", "…状态"),
    MorphemeEntry("ence", "state, quality", "…状态"),
    MorphemeEntry("ancy", "state, quality", "…状态"),
    MorphemeEntry("ency", "state, quality", "…状态"),
    MorphemeEntry("dom", "state, realm", "…状态，领域"),
    MorphemeEntry("hood", "state, condition", "…状态"),
    MorphemeEntry("ship", "state, skill", "…状态，技能"),
    MorphemeEntry("ism", "belief, practice", "…主义"),
    MorphemeEntry("ure", "act, process", "…行为"),
    MorphemeEntry("age", "action, result", "…行为，结果"),
    MorphemeEntry("ery", "place, practice", "…场所"),
    MorphemeEntry("ry", "place, practice", "…场所"),
    MorphemeEntry("cy", "state, quality", "…状态"),
    MorphemeEntry("th", "state", "…状态"),

    # Adjective suffixes
    MorphemeEntry("able", "capable of", "能够…的"),
    MorphemeEntry("ible", "capable of", "能够…的"),
    MorphemeEntry("al", "relating to", "…的"),
    MorphemeEntry("ial", "relating to", "…的"),
    MorphemeEntry("ical", "relating to", "…的"),
    MorphemeEntry("ful", "full of", "充满…的"),
    MorphemeEntry("less", "without", "没有…的"),
    MorphemeEntry("ous", "full of", "…的"),
    MorphemeEntry("ious", "full of", "…的"),
    MorphemeEntry("eous", "full of", "…的"),
    MorphemeEntry("ive", "tending to", "…的"),
    MorphemeEntry("ative", "tending to", "…的"),
    MorphemeEntry("itive", "tending to", "…的"),
    MorphemeEntry("ic", "relating to", "…的"),
    MorphemeEntry("tic", "relating to", "…的"),
    MorphemeEntry("ary", "relating to", "…的"),
    MorphemeEntry("ory", "relating to", "…的"),
    MorphemeEntry("ish", "like, somewhat", "像…的"),
    MorphemeEntry("like", "similar to", "像…的"),
    MorphemeEntry("ly", "in manner of, like", "…地，…的"),
    MorphemeEntry("y", "having quality", "…的"),
    MorphemeEntry("ed", "having", "有…的"),
    MorphemeEntry("en", "made of", "由…制成"),
    MorphemeEntry("ern", "direction", "…方向的"),
    MorphemeEntry("ese", "nationality", "…国的"),
    MorphemeEntry("ward", "direction", "向…"),
    MorphemeEntry("wards", "direction", "向…"),
    MorphemeEntry("wise", "manner", "…方式"),

    # Verb suffixes
    MorphemeEntry("ize", "make, become", "使…化"),
    MorphemeEntry("ise", "make, become", "使…化"),
    MorphemeEntry("fy", "make", "使…"),
    MorphemeEntry("ify", "make", "使…"),
    MorphemeEntry("ate", "make, act", "使…，做"),

    # Diminutive, learned and miscellaneous suffixes
    MorphemeEntry("ing", "action, process", "…中"),
    MorphemeEntry("ling", "small, young", "小…"),
    MorphemeEntry("let", "small", "小…"),
    MorphemeEntry("ette", "small", "小…"),
    MorphemeEntry("oid", "like", "像…的"),
    MorphemeEntry("scope", "instrument for seeing", "…镜"),
    MorphemeEntry("graphy", "writing, study", "…学，…术"),
    MorphemeEntry("logy", "study of", "…学"),
    MorphemeEntry("nomy", "law, knowledge", "…学"),
    MorphemeEntry("metry", "measurement", "…测量"),
    MorphemeEntry("phobia", "fear", "恐…症"),
    MorphemeEntry("cracy", "rule by", "…统治"),
    MorphemeEntry("crat", "ruler", "…统治者"),
    MorphemeEntry("arch", "ruler", "统治者"),
    MorphemeEntry("archy", "rule", "统治"),
    MorphemeEntry("cide", "killing", "杀"),
    MorphemeEntry("path", "feeling, disease", "…病"),
    MorphemeEntry("pathy", "feeling", "…感"),
)


def by_length(entries: Sequence[MorphemeEntry]) -> List[MorphemeEntry]:
    """Longest patterns first; equal lengths keep table order."""
    return sorted(entries, key=lambda entry: len(entry.pattern), reverse=True)


SORTED_PREFIXES = by_length(PREFIXES)
SORTED_ROOTS = by_length(ROOTS)
SORTED_SUFFIXES = by_length(SUFFIXES)
