"""FontAwesome icon table: icon names, CSS codes and glyph characters.

Each member of :class:`FontAwesome` maps an icon name to the private-use
character that draws it in the FontAwesome font. CSS codes follow the
FontAwesome 4.7 class names (``fa-github``) and are derived from the member names,
so enum aliases (``gear`` for ``cog``) become CSS aliases automatically. Class
names that are not Python identifiers (``500px``, ``try``) get a legal member
name and an explicit entry in ``_CSS_NAMES``.

Usage:
    icon_from_code("fa-github")   # FontAwesome.github
    icon_string(FontAwesome.github)  # "\\uf09b"
"""

from __future__ import annotations

from enum import Enum

from fa2png.config import CSS_PREFIX

# Member name -> CSS class name, for classes that are not Python identifiers
_CSS_NAMES = {
    "five_hundred_px": "500px",
    "try_": "try",
}


def _css_code(member_name: str) -> str:
    name = _CSS_NAMES.get(member_name, member_name)
    return CSS_PREFIX + name.replace("_", "-")


class FontAwesome(Enum):
    """Icon names of the FontAwesome 4.7 font. Values are glyph characters."""

    glass = "\uf000"
    music = "\uf001"
    search = "\uf002"
    envelope_o = "\uf003"
    heart = "\uf004"
    star = "\uf005"
    star_o = "\uf006"
    user = "\uf007"
    film = "\uf008"
    th_large = "\uf009"
    th = "\uf00a"
    th_list = "\uf00b"
    check = "\uf00c"
    times = "\uf00d"
    close = "\uf00d"
    remove = "\uf00d"
    search_plus = "\uf00e"
    search_minus = "\uf010"
    power_off = "\uf011"
    signal = "\uf012"
    cog = "\uf013"
    gear = "\uf013"
    trash_o = "\uf014"
    home = "\uf015"
    file_o = "\uf016"
    clock_o = "\uf017"
    road = "\uf018"
    download = "\uf019"
    arrow_circle_o_down = "\uf01a"
    arrow_circle_o_up = "\uf01b"
    inbox = "\uf01c"
    play_circle_o = "\uf01d"
    repeat = "\uf01e"
    rotate_right = "\uf01e"
    refresh = "\uf021"
    list_alt = "\uf022"
    lock = "\uf023"
    flag = "\uf024"
    headphones = "\uf025"
    volume_off = "\uf026"
    volume_down = "\uf027"
    volume_up = "\uf028"
    qrcode = "\uf029"
    barcode = "\uf02a"
    tag = "\uf02b"
    tags = "\uf02c"
    book = "\uf02d"
    bookmark = "\uf02e"
    print = "\uf02f"
    camera = "\uf030"
    font = "\uf031"
    bold = "\uf032"
    italic = "\uf033"
    text_height = "\uf034"
    text_width = "\uf035"
    align_left = "\uf036"
    align_center = "\uf037"
    align_right = "\uf038"
    align_justify = "\uf039"
    list = "\uf03a"
    outdent = "\uf03b"
    dedent = "\uf03b"
    indent = "\uf03c"
    video_camera = "\uf03d"
    picture_o = "\uf03e"
    photo = "\uf03e"
    image = "\uf03e"
    pencil = "\uf040"
    map_marker = "\uf041"
    adjust = "\uf042"
    tint = "\uf043"
    pencil_square_o = "\uf044"
    edit = "\uf044"
    share_square_o = "\uf045"
    check_square_o = "\uf046"
    arrows = "\uf047"
    step_backward = "\uf048"
    fast_backward = "\uf049"
    backward = "\uf04a"
    play = "\uf04b"
    pause = "\uf04c"
    stop = "\uf04d"
    forward = "\uf04e"
    fast_forward = "\uf050"
    step_forward = "\uf051"
    eject = "\uf052"
    chevron_left = "\uf053"
    chevron_right = "\uf054"
    plus_circle = "\uf055"
    minus_circle = "\uf056"
    times_circle = "\uf057"
    check_circle = "\uf058"
    question_circle = "\uf059"
    info_circle = "\uf05a"
    crosshairs = "\uf05b"
    times_circle_o = "\uf05c"
    check_circle_o = "\uf05d"
    ban = "\uf05e"
    arrow_left = "\uf060"
    arrow_right = "\uf061"
    arrow_up = "\uf062"
    arrow_down = "\uf063"
    share = "\uf064"
    mail_forward = "\uf064"
    expand = "\uf065"
    compress = "\uf066"
    plus = "\uf067"
    minus = "\uf068"
    asterisk = "\uf069"
    exclamation_circle = "\uf06a"
    gift = "\uf06b"
    leaf = "\uf06c"
    fire = "\uf06d"
    eye = "\uf06e"
    eye_slash = "\uf070"
    exclamation_triangle = "\uf071"
    warning = "\uf071"
    plane = "\uf072"
    calendar = "\uf073"
    random = "\uf074"
    comment = "\uf075"
    magnet = "\uf076"
    chevron_up = "\uf077"
    chevron_down = "\uf078"
    retweet = "\uf079"
    shopping_cart = "\uf07a"
    folder = "\uf07b"
    folder_open = "\uf07c"
    arrows_v = "\uf07d"
    arrows_h = "\uf07e"
    bar_chart = "\uf080"
    bar_chart_o = "\uf080"
    twitter_square = "\uf081"
    facebook_square = "\uf082"
    camera_retro = "\uf083"
    key = "\uf084"
    cogs = "\uf085"
    gears = "\uf085"
    comments = "\uf086"
    thumbs_o_up = "\uf087"
    thumbs_o_down = "\uf088"
    star_half = "\uf089"
    heart_o = "\uf08a"
    sign_out = "\uf08b"
    linkedin_square = "\uf08c"
    thumb_tack = "\uf08d"
    external_link = "\uf08e"
    sign_in = "\uf090"
    trophy = "\uf091"
    github_square = "\uf092"
    upload = "\uf093"
    lemon_o = "\uf094"
    phone = "\uf095"
    square_o = "\uf096"
    bookmark_o = "\uf097"
    phone_square = "\uf098"
    twitter = "\uf099"
    facebook = "\uf09a"
    facebook_f = "\uf09a"
    github = "\uf09b"
    unlock = "\uf09c"
    credit_card = "\uf09d"
    rss = "\uf09e"
    feed = "\uf09e"
    hdd_o = "\uf0a0"
    bullhorn = "\uf0a1"
    bell_o = "\uf0a2"
    certificate = "\uf0a3"
    hand_o_right = "\uf0a4"
    hand_o_left = "\uf0a5"
    hand_o_up = "\uf0a6"
    hand_o_down = "\uf0a7"
    arrow_circle_left = "\uf0a8"
    arrow_circle_right = "\uf0a9"
    arrow_circle_up = "\uf0aa"
    arrow_circle_down = "\uf0ab"
    globe = "\uf0ac"
    wrench = "\uf0ad"
    tasks = "\uf0ae"
    filter = "\uf0b0"
    briefcase = "\uf0b1"
    arrows_alt = "\uf0b2"
    users = "\uf0c0"
    group = "\uf0c0"
    link = "\uf0c1"
    chain = "\uf0c1"
    cloud = "\uf0c2"
    flask = "\uf0c3"
    scissors = "\uf0c4"
    cut = "\uf0c4"
    files_o = "\uf0c5"
    copy = "\uf0c5"
    paperclip = "\uf0c6"
    floppy_o = "\uf0c7"
    save = "\uf0c7"
    square = "\uf0c8"
    bars = "\uf0c9"
    navicon = "\uf0c9"
    reorder = "\uf0c9"
    list_ul = "\uf0ca"
    list_ol = "\uf0cb"
    strikethrough = "\uf0cc"
    underline = "\uf0cd"
    table = "\uf0ce"
    magic = "\uf0d0"
    truck = "\uf0d1"
    pinterest = "\uf0d2"
    pinterest_square = "\uf0d3"
    google_plus_square = "\uf0d4"
    google_plus = "\uf0d5"
    money = "\uf0d6"
    caret_down = "\uf0d7"
    caret_up = "\uf0d8"
    caret_left = "\uf0d9"
    caret_right = "\uf0da"
    columns = "\uf0db"
    sort = "\uf0dc"
    unsorted = "\uf0dc"
    sort_desc = "\uf0dd"
    sort_down = "\uf0dd"
    sort_asc = "\uf0de"
    sort_up = "\uf0de"
    envelope = "\uf0e0"
    linkedin = "\uf0e1"
    undo = "\uf0e2"
    rotate_left = "\uf0e2"
    gavel = "\uf0e3"
    legal = "\uf0e3"
    tachometer = "\uf0e4"
    dashboard = "\uf0e4"
    comment_o = "\uf0e5"
    comments_o = "\uf0e6"
    bolt = "\uf0e7"
    flash = "\uf0e7"
    sitemap = "\uf0e8"
    umbrella = "\uf0e9"
    clipboard = "\uf0ea"
    paste = "\uf0ea"
    lightbulb_o = "\uf0eb"
    exchange = "\uf0ec"
    cloud_download = "\uf0ed"
    cloud_upload = "\uf0ee"
    user_md = "\uf0f0"
    stethoscope = "\uf0f1"
    suitcase = "\uf0f2"
    bell = "\uf0f3"
    coffee = "\uf0f4"
    cutlery = "\uf0f5"
    file_text_o = "\uf0f6"
    building_o = "\uf0f7"
    hospital_o = "\uf0f8"
    ambulance = "\uf0f9"
    medkit = "\uf0fa"
    fighter_jet = "\uf0fb"
    beer = "\uf0fc"
    h_square = "\uf0fd"
    plus_square = "\uf0fe"
    angle_double_left = "\uf100"
    angle_double_right = "\uf101"
    angle_double_up = "\uf102"
    angle_double_down = "\uf103"
    angle_left = "\uf104"
    angle_right = "\uf105"
    angle_up = "\uf106"
    angle_down = "\uf107"
    desktop = "\uf108"
    laptop = "\uf109"
    tablet = "\uf10a"
    mobile = "\uf10b"
    mobile_phone = "\uf10b"
    circle_o = "\uf10c"
    quote_left = "\uf10d"
    quote_right = "\uf10e"
    spinner = "\uf110"
    circle = "\uf111"
    reply = "\uf112"
    mail_reply = "\uf112"
    github_alt = "\uf113"
    folder_o = "\uf114"
    folder_open_o = "\uf115"
    smile_o = "\uf118"
    frown_o = "\uf119"
    meh_o = "\uf11a"
    gamepad = "\uf11b"
    keyboard_o = "\uf11c"
    flag_o = "\uf11d"
    flag_checkered = "\uf11e"
    terminal = "\uf120"
    code = "\uf121"
    reply_all = "\uf122"
    mail_reply_all = "\uf122"
    star_half_o = "\uf123"
    star_half_empty = "\uf123"
    star_half_full = "\uf123"
    location_arrow = "\uf124"
    crop = "\uf125"
    code_fork = "\uf126"
    chain_broken = "\uf127"
    unlink = "\uf127"
    question = "\uf128"
    info = "\uf129"
    exclamation = "\uf12a"
    superscript = "\uf12b"
    subscript = "\uf12c"
    eraser = "\uf12d"
    puzzle_piece = "\uf12e"
    microphone = "\uf130"
    microphone_slash = "\uf131"
    shield = "\uf132"
    calendar_o = "\uf133"
    fire_extinguisher = "\uf134"
    rocket = "\uf135"
    maxcdn = "\uf136"
    chevron_circle_left = "\uf137"
    chevron_circle_right = "\uf138"
    chevron_circle_up = "\uf139"
    chevron_circle_down = "\uf13a"
    html5 = "\uf13b"
    css3 = "\uf13c"
    anchor = "\uf13d"
    unlock_alt = "\uf13e"
    bullseye = "\uf140"
    ellipsis_h = "\uf141"
    ellipsis_v = "\uf142"
    rss_square = "\uf143"
    play_circle = "\uf144"
    ticket = "\uf145"
    minus_square = "\uf146"
    minus_square_o = "\uf147"
    level_up = "\uf148"
    level_down = "\uf149"
    check_square = "\uf14a"
    pencil_square = "\uf14b"
    external_link_square = "\uf14c"
    share_square = "\uf14d"
    compass = "\uf14e"
    caret_square_o_down = "\uf150"
    toggle_down = "\uf150"
    caret_square_o_up = "\uf151"
    toggle_up = "\uf151"
    caret_square_o_right = "\uf152"
    toggle_right = "\uf152"
    eur = "\uf153"
    euro = "\uf153"
    gbp = "\uf154"
    usd = "\uf155"
    dollar = "\uf155"
    inr = "\uf156"
    rupee = "\uf156"
    jpy = "\uf157"
    cny = "\uf157"
    rmb = "\uf157"
    yen = "\uf157"
    rub = "\uf158"
    ruble = "\uf158"
    rouble = "\uf158"
    krw = "\uf159"
    won = "\uf159"
    btc = "\uf15a"
    bitcoin = "\uf15a"
    file = "\uf15b"
    file_text = "\uf15c"
    sort_alpha_asc = "\uf15d"
    sort_alpha_desc = "\uf15e"
    sort_amount_asc = "\uf160"
    sort_amount_desc = "\uf161"
    sort_numeric_asc = "\uf162"
    sort_numeric_desc = "\uf163"
    thumbs_up = "\uf164"
    thumbs_down = "\uf165"
    youtube_square = "\uf166"
    youtube = "\uf167"
    xing = "\uf168"
    xing_square = "\uf169"
    youtube_play = "\uf16a"
    dropbox = "\uf16b"
    stack_overflow = "\uf16c"
    instagram = "\uf16d"
    flickr = "\uf16e"
    adn = "\uf170"
    bitbucket = "\uf171"
    bitbucket_square = "\uf172"
    tumblr = "\uf173"
    tumblr_square = "\uf174"
    long_arrow_down = "\uf175"
    long_arrow_up = "\uf176"
    long_arrow_left = "\uf177"
    long_arrow_right = "\uf178"
    apple = "\uf179"
    windows = "\uf17a"
    android = "\uf17b"
    linux = "\uf17c"
    dribbble = "\uf17d"
    skype = "\uf17e"
    foursquare = "\uf180"
    trello = "\uf181"
    female = "\uf182"
    male = "\uf183"
    gratipay = "\uf184"
    gittip = "\uf184"
    sun_o = "\uf185"
    moon_o = "\uf186"
    archive = "\uf187"
    bug = "\uf188"
    vk = "\uf189"
    weibo = "\uf18a"
    renren = "\uf18b"
    pagelines = "\uf18c"
    stack_exchange = "\uf18d"
    arrow_circle_o_right = "\uf18e"
    arrow_circle_o_left = "\uf190"
    caret_square_o_left = "\uf191"
    toggle_left = "\uf191"
    dot_circle_o = "\uf192"
    wheelchair = "\uf193"
    vimeo_square = "\uf194"
    try_ = "\uf195"
    turkish_lira = "\uf195"
    plus_square_o = "\uf196"
    space_shuttle = "\uf197"
    slack = "\uf198"
    envelope_square = "\uf199"
    wordpress = "\uf19a"
    openid = "\uf19b"
    university = "\uf19c"
    institution = "\uf19c"
    bank = "\uf19c"
    graduation_cap = "\uf19d"
    mortar_board = "\uf19d"
    yahoo = "\uf19e"
    google = "\uf1a0"
    reddit = "\uf1a1"
    reddit_square = "\uf1a2"
    stumbleupon_circle = "\uf1a3"
    stumbleupon = "\uf1a4"
    delicious = "\uf1a5"
    digg = "\uf1a6"
    pied_piper_pp = "\uf1a7"
    pied_piper_alt = "\uf1a8"
    drupal = "\uf1a9"
    joomla = "\uf1aa"
    language = "\uf1ab"
    fax = "\uf1ac"
    building = "\uf1ad"
    child = "\uf1ae"
    paw = "\uf1b0"
    spoon = "\uf1b1"
    cube = "\uf1b2"
    cubes = "\uf1b3"
    behance = "\uf1b4"
    behance_square = "\uf1b5"
    steam = "\uf1b6"
    steam_square = "\uf1b7"
    recycle = "\uf1b8"
    car = "\uf1b9"
    automobile = "\uf1b9"
    taxi = "\uf1ba"
    cab = "\uf1ba"
    tree = "\uf1bb"
    spotify = "\uf1bc"
    deviantart = "\uf1bd"
    soundcloud = "\uf1be"
    database = "\uf1c0"
    file_pdf_o = "\uf1c1"
    file_word_o = "\uf1c2"
    file_excel_o = "\uf1c3"
    file_powerpoint_o = "\uf1c4"
    file_image_o = "\uf1c5"
    file_photo_o = "\uf1c5"
    file_picture_o = "\uf1c5"
    file_archive_o = "\uf1c6"
    file_zip_o = "\uf1c6"
    file_audio_o = "\uf1c7"
    file_sound_o = "\uf1c7"
    file_video_o = "\uf1c8"
    file_movie_o = "\uf1c8"
    file_code_o = "\uf1c9"
    vine = "\uf1ca"
    codepen = "\uf1cb"
    jsfiddle = "\uf1cc"
    life_ring = "\uf1cd"
    life_bouy = "\uf1cd"
    life_buoy = "\uf1cd"
    life_saver = "\uf1cd"
    support = "\uf1cd"
    circle_o_notch = "\uf1ce"
    rebel = "\uf1d0"
    ra = "\uf1d0"
    resistance = "\uf1d0"
    empire = "\uf1d1"
    ge = "\uf1d1"
    git_square = "\uf1d2"
    git = "\uf1d3"
    hacker_news = "\uf1d4"
    y_combinator_square = "\uf1d4"
    yc_square = "\uf1d4"
    tencent_weibo = "\uf1d5"
    qq = "\uf1d6"
    weixin = "\uf1d7"
    wechat = "\uf1d7"
    paper_plane = "\uf1d8"
    send = "\uf1d8"
    paper_plane_o = "\uf1d9"
    send_o = "\uf1d9"
    history = "\uf1da"
    circle_thin = "\uf1db"
    header = "\uf1dc"
    paragraph = "\uf1dd"
    sliders = "\uf1de"
    share_alt = "\uf1e0"
    share_alt_square = "\uf1e1"
    bomb = "\uf1e2"
    futbol_o = "\uf1e3"
    soccer_ball_o = "\uf1e3"
    tty = "\uf1e4"
    binoculars = "\uf1e5"
    plug = "\uf1e6"
    slideshare = "\uf1e7"
    twitch = "\uf1e8"
    yelp = "\uf1e9"
    newspaper_o = "\uf1ea"
    wifi = "\uf1eb"
    calculator = "\uf1ec"
    paypal = "\uf1ed"
    google_wallet = "\uf1ee"
    cc_visa = "\uf1f0"
    cc_mastercard = "\uf1f1"
    cc_discover = "\uf1f2"
    cc_amex = "\uf1f3"
    cc_paypal = "\uf1f4"
    cc_stripe = "\uf1f5"
    bell_slash = "\uf1f6"
    bell_slash_o = "\uf1f7"
    trash = "\uf1f8"
    copyright = "\uf1f9"
    at = "\uf1fa"
    eyedropper = "\uf1fb"
    paint_brush = "\uf1fc"
    birthday_cake = "\uf1fd"
    area_chart = "\uf1fe"
    pie_chart = "\uf200"
    line_chart = "\uf201"
    lastfm = "\uf202"
    lastfm_square = "\uf203"
    toggle_off = "\uf204"
    toggle_on = "\uf205"
    bicycle = "\uf206"
    bus = "\uf207"
    ioxhost = "\uf208"
    angellist = "\uf209"
    cc = "\uf20a"
    ils = "\uf20b"
    shekel = "\uf20b"
    sheqel = "\uf20b"
    meanpath = "\uf20c"
    buysellads = "\uf20d"
    connectdevelop = "\uf20e"
    dashcube = "\uf210"
    forumbee = "\uf211"
    leanpub = "\uf212"
    sellsy = "\uf213"
    shirtsinbulk = "\uf214"
    simplybuilt = "\uf215"
    skyatlas = "\uf216"
    cart_plus = "\uf217"
    cart_arrow_down = "\uf218"
    diamond = "\uf219"
    ship = "\uf21a"
    user_secret = "\uf21b"
    motorcycle = "\uf21c"
    street_view = "\uf21d"
    heartbeat = "\uf21e"
    venus = "\uf221"
    mars = "\uf222"
    mercury = "\uf223"
    transgender = "\uf224"
    intersex = "\uf224"
    transgender_alt = "\uf225"
    venus_double = "\uf226"
    mars_double = "\uf227"
    venus_mars = "\uf228"
    mars_stroke = "\uf229"
    mars_stroke_v = "\uf22a"
    mars_stroke_h = "\uf22b"
    neuter = "\uf22c"
    genderless = "\uf22d"
    facebook_official = "\uf230"
    pinterest_p = "\uf231"
    whatsapp = "\uf232"
    server = "\uf233"
    user_plus = "\uf234"
    user_times = "\uf235"
    bed = "\uf236"
    hotel = "\uf236"
    viacoin = "\uf237"
    train = "\uf238"
    subway = "\uf239"
    medium = "\uf23a"
    y_combinator = "\uf23b"
    yc = "\uf23b"
    optin_monster = "\uf23c"
    opencart = "\uf23d"
    expeditedssl = "\uf23e"
    battery_full = "\uf240"
    battery_4 = "\uf240"
    battery = "\uf240"
    battery_three_quarters = "\uf241"
    battery_3 = "\uf241"
    battery_half = "\uf242"
    battery_2 = "\uf242"
    battery_quarter = "\uf243"
    battery_1 = "\uf243"
    battery_empty = "\uf244"
    battery_0 = "\uf244"
    mouse_pointer = "\uf245"
    i_cursor = "\uf246"
    object_group = "\uf247"
    object_ungroup = "\uf248"
    sticky_note = "\uf249"
    sticky_note_o = "\uf24a"
    cc_jcb = "\uf24b"
    cc_diners_club = "\uf24c"
    clone = "\uf24d"
    balance_scale = "\uf24e"
    hourglass_o = "\uf250"
    hourglass_start = "\uf251"
    hourglass_1 = "\uf251"
    hourglass_half = "\uf252"
    hourglass_2 = "\uf252"
    hourglass_end = "\uf253"
    hourglass_3 = "\uf253"
    hourglass = "\uf254"
    hand_rock_o = "\uf255"
    hand_grab_o = "\uf255"
    hand_paper_o = "\uf256"
    hand_stop_o = "\uf256"
    hand_scissors_o = "\uf257"
    hand_lizard_o = "\uf258"
    hand_spock_o = "\uf259"
    hand_pointer_o = "\uf25a"
    hand_peace_o = "\uf25b"
    trademark = "\uf25c"
    registered = "\uf25d"
    creative_commons = "\uf25e"
    gg = "\uf260"
    gg_circle = "\uf261"
    tripadvisor = "\uf262"
    odnoklassniki = "\uf263"
    odnoklassniki_square = "\uf264"
    get_pocket = "\uf265"
    wikipedia_w = "\uf266"
    safari = "\uf267"
    chrome = "\uf268"
    firefox = "\uf269"
    opera = "\uf26a"
    internet_explorer = "\uf26b"
    television = "\uf26c"
    tv = "\uf26c"
    contao = "\uf26d"
    five_hundred_px = "\uf26e"
    amazon = "\uf270"
    calendar_plus_o = "\uf271"
    calendar_minus_o = "\uf272"
    calendar_times_o = "\uf273"
    calendar_check_o = "\uf274"
    industry = "\uf275"
    map_pin = "\uf276"
    map_signs = "\uf277"
    map_o = "\uf278"
    map = "\uf279"
    commenting = "\uf27a"
    commenting_o = "\uf27b"
    houzz = "\uf27c"
    vimeo = "\uf27d"
    black_tie = "\uf27e"
    fonticons = "\uf280"
    reddit_alien = "\uf281"
    edge = "\uf282"
    credit_card_alt = "\uf283"
    codiepie = "\uf284"
    modx = "\uf285"
    fort_awesome = "\uf286"
    usb = "\uf287"
    product_hunt = "\uf288"
    mixcloud = "\uf289"
    scribd = "\uf28a"
    pause_circle = "\uf28b"
    pause_circle_o = "\uf28c"
    stop_circle = "\uf28d"
    stop_circle_o = "\uf28e"
    shopping_bag = "\uf290"
    shopping_basket = "\uf291"
    hashtag = "\uf292"
    bluetooth = "\uf293"
    bluetooth_b = "\uf294"
    percent = "\uf295"
    gitlab = "\uf296"
    wpbeginner = "\uf297"
    wpforms = "\uf298"
    envira = "\uf299"
    universal_access = "\uf29a"
    wheelchair_alt = "\uf29b"
    question_circle_o = "\uf29c"
    blind = "\uf29d"
    audio_description = "\uf29e"
    volume_control_phone = "\uf2a0"
    braille = "\uf2a1"
    assistive_listening_systems = "\uf2a2"
    american_sign_language_interpreting = "\uf2a3"
    asl_interpreting = "\uf2a3"
    deaf = "\uf2a4"
    deafness = "\uf2a4"
    hard_of_hearing = "\uf2a4"
    glide = "\uf2a5"
    glide_g = "\uf2a6"
    sign_language = "\uf2a7"
    signing = "\uf2a7"
    low_vision = "\uf2a8"
    viadeo = "\uf2a9"
    viadeo_square = "\uf2aa"
    snapchat = "\uf2ab"
    snapchat_ghost = "\uf2ac"
    snapchat_square = "\uf2ad"
    pied_piper = "\uf2ae"
    first_order = "\uf2b0"
    yoast = "\uf2b1"
    themeisle = "\uf2b2"
    google_plus_official = "\uf2b3"
    google_plus_circle = "\uf2b3"
    font_awesome = "\uf2b4"
    fa = "\uf2b4"
    handshake_o = "\uf2b5"
    envelope_open = "\uf2b6"
    envelope_open_o = "\uf2b7"
    linode = "\uf2b8"
    address_book = "\uf2b9"
    address_book_o = "\uf2ba"
    address_card = "\uf2bb"
    vcard = "\uf2bb"
    address_card_o = "\uf2bc"
    vcard_o = "\uf2bc"
    user_circle = "\uf2bd"
    user_circle_o = "\uf2be"
    user_o = "\uf2c0"
    id_badge = "\uf2c1"
    id_card = "\uf2c2"
    drivers_license = "\uf2c2"
    id_card_o = "\uf2c3"
    drivers_license_o = "\uf2c3"
    quora = "\uf2c4"
    free_code_camp = "\uf2c5"
    telegram = "\uf2c6"
    thermometer_full = "\uf2c7"
    thermometer_4 = "\uf2c7"
    thermometer = "\uf2c7"
    thermometer_three_quarters = "\uf2c8"
    thermometer_3 = "\uf2c8"
    thermometer_half = "\uf2c9"
    thermometer_2 = "\uf2c9"
    thermometer_quarter = "\uf2ca"
    thermometer_1 = "\uf2ca"
    thermometer_empty = "\uf2cb"
    thermometer_0 = "\uf2cb"
    shower = "\uf2cc"
    bath = "\uf2cd"
    bathtub = "\uf2cd"
    s15 = "\uf2cd"
    podcast = "\uf2ce"
    window_maximize = "\uf2d0"
    window_minimize = "\uf2d1"
    window_restore = "\uf2d2"
    window_close = "\uf2d3"
    times_rectangle = "\uf2d3"
    window_close_o = "\uf2d4"
    times_rectangle_o = "\uf2d4"
    bandcamp = "\uf2d5"
    grav = "\uf2d6"
    etsy = "\uf2d7"
    imdb = "\uf2d8"
    ravelry = "\uf2d9"
    eercast = "\uf2da"
    microchip = "\uf2db"
    snowflake_o = "\uf2dc"
    superpowers = "\uf2dd"
    wpexplorer = "\uf2de"
    meetup = "\uf2e0"

    @property
    def css_code(self) -> str:
        """CSS code of this icon, e.g. ``fa-github``."""
        return _css_code(self.name)

    @property
    def codepoint(self) -> int:
        return ord(self.value)


def _build_code_table() -> dict[str, FontAwesome]:
    """Map every CSS code, aliases included, to its icon."""
    return {
        _css_code(name): member for name, member in FontAwesome.__members__.items()
    }


# CSS code -> icon ("fa-github" -> FontAwesome.github), aliases included
ICON_CODES: dict[str, FontAwesome] = _build_code_table()


def icon_string(icon: FontAwesome) -> str:
    """Return the one-character string that draws ``icon`` in FontAwesome."""
    return icon.value[:1]


def icon_from_code(code: str) -> FontAwesome | None:
    """Look up an icon by its CSS code. Unknown codes return None."""
    return ICON_CODES.get(code.strip())


def icon_string_for_code(code: str) -> str | None:
    """Return the glyph string for a CSS code, or None if the code is unknown."""
    icon = icon_from_code(code)
    if icon is None:
        return None
    return icon_string(icon)


def search_icons(term: str | None = None) -> list[str]:
    """Return sorted CSS codes containing ``term`` (all codes when empty)."""
    if not term:
        return sorted(ICON_CODES)
    needle = term.lower()
    return sorted(code for code in ICON_CODES if needle in code)
